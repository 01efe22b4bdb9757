"""Forms for activity log entries."""

from django import forms
from django.utils import timezone

from gridwork.apps.core.forms import DateTimeLocalInput, StyledFormMixin
from gridwork.apps.logs.models import LogEntry


class LogEntryForm(StyledFormMixin, forms.ModelForm):
    """Create or edit a log entry by hand."""

    occurred_at = forms.DateTimeField(
        label="Date",
        widget=DateTimeLocalInput(),
        input_formats=["%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M"],
    )

    class Meta:
        model = LogEntry
        fields = ["name", "action", "category", "status", "occurred_at"]
        labels = {
            "name": "Performed by",
        }

    def clean_occurred_at(self):
        occurred_at = self.cleaned_data["occurred_at"]
        if occurred_at > timezone.now():
            raise forms.ValidationError("Date cannot be in the future.")
        return occurred_at
