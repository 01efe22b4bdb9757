"""Core form utilities and mixins."""

from django import forms

# Widget type to CSS class mapping
WIDGET_CSS_CLASSES = {
    forms.TextInput: "form-input",
    forms.EmailInput: "form-input",
    forms.NumberInput: "form-input",
    forms.DateInput: "form-input",
    forms.DateTimeInput: "form-input",
    forms.Textarea: "form-input form-textarea",
    forms.Select: "form-input",
    forms.CheckboxInput: "checkbox",
}


class SearchForm(forms.Form):
    """Reusable search form for list pages."""

    q = forms.CharField(
        label="",
        required=False,
        widget=forms.TextInput(
            attrs={"type": "search", "placeholder": "Search", "class": "search-input"}
        ),
    )


class StyledFormMixin:
    """
    Mixin that adds CSS classes to form widgets automatically.

    Apply to form classes to enable use of {{ field }} in templates
    while maintaining consistent styling.

    Usage:
        class MyForm(StyledFormMixin, forms.Form):
            name = forms.CharField()

    The mixin preserves any existing widget attrs and only adds
    the CSS class if not already present.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._apply_widget_classes()

    def _apply_widget_classes(self):
        """Apply CSS classes to all field widgets based on widget type."""
        for field in self.fields.values():
            widget = field.widget
            for widget_type, css_class in WIDGET_CSS_CLASSES.items():
                if isinstance(widget, widget_type):
                    existing_classes = widget.attrs.get("class", "").split()
                    for cls in css_class.split():
                        if cls not in existing_classes:
                            existing_classes.append(cls)
                    widget.attrs["class"] = " ".join(existing_classes)
                    break


class DateInput(forms.DateInput):
    """HTML5 date picker."""

    input_type = "date"

    def __init__(self, attrs=None):
        super().__init__(attrs=attrs, format="%Y-%m-%d")


class DateTimeLocalInput(forms.DateTimeInput):
    """HTML5 datetime-local picker."""

    input_type = "datetime-local"

    def __init__(self, attrs=None):
        super().__init__(attrs=attrs, format="%Y-%m-%dT%H:%M")
