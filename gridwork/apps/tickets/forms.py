"""Forms for support tickets."""

from django import forms

from gridwork.apps.core.forms import DateInput, StyledFormMixin
from gridwork.apps.tickets.models import Ticket


class TicketForm(StyledFormMixin, forms.ModelForm):
    """Create or edit a ticket. The ticket number is assigned on save."""

    class Meta:
        model = Ticket
        fields = ["name", "concern", "category", "status", "approved_by", "date_requested"]
        widgets = {
            "date_requested": DateInput(),
            "concern": forms.TextInput(attrs={"placeholder": "What is the issue?"}),
        }
        labels = {
            "approved_by": "Approved by",
        }

    def clean_name(self):
        name = (self.cleaned_data.get("name") or "").strip()
        if not name:
            raise forms.ValidationError("Name is required.")
        return name
