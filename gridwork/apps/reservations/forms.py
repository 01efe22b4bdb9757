"""Forms for reservations."""

from django import forms

from gridwork.apps.core.forms import DateInput, StyledFormMixin
from gridwork.apps.reservations.models import Reservation


class ReservationForm(StyledFormMixin, forms.ModelForm):
    """Create or edit a reservation."""

    class Meta:
        model = Reservation
        fields = [
            "name",
            "category",
            "email",
            "contact_number",
            "start_date",
            "end_date",
            "location",
            "status",
        ]
        widgets = {
            "start_date": DateInput(),
            "end_date": DateInput(),
        }
        labels = {
            "contact_number": "Contact No.",
        }

    def clean_name(self):
        name = (self.cleaned_data.get("name") or "").strip()
        if not name:
            raise forms.ValidationError("Name is required.")
        return name
