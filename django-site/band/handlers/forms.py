"""Django form for the HTML contact form.

The form owns required-field enforcement; the contact service only ever
receives a ContactSubmission built from a valid form.
"""

from typing import Any

from django import forms

from band.domain import ContactSubmission, EventType, MusicStyle

EVENT_TYPE_PLACEHOLDER = ("", "Selecciona un tipo de evento")


class ContactForm(forms.Form):
    name = forms.CharField(max_length=200)
    email = forms.EmailField()
    phone = forms.CharField(max_length=40, required=False)
    event_type = forms.ChoiceField(choices=[EVENT_TYPE_PLACEHOLDER, *EventType.choices()])
    event_date = forms.DateField(input_formats=["%Y-%m-%d"])
    event_location = forms.CharField(max_length=200)
    music_styles = forms.MultipleChoiceField(choices=MusicStyle.choices(), required=False)
    message = forms.CharField(required=False)

    def to_submission(self) -> ContactSubmission:
        """Build the submission from cleaned data. Only valid forms may call this."""
        data = self.cleaned_data
        return ContactSubmission(
            name=data["name"],
            email=data["email"],
            phone=data["phone"],
            event_type=EventType.from_code(data["event_type"]),
            event_date=data["event_date"],
            event_location=data["event_location"],
            music_styles=frozenset(MusicStyle.from_code(code) for code in data["music_styles"]),
            message=data["message"],
        )

    @staticmethod
    def initial_from(draft: ContactSubmission | None) -> dict[str, Any]:
        """Initial values for re-rendering a kept draft; empty for a cleared form."""
        if draft is None:
            return {}
        return {
            "name": draft.name,
            "email": draft.email,
            "phone": draft.phone,
            "event_type": draft.event_type.code,
            "event_date": draft.event_date.isoformat(),
            "event_location": draft.event_location,
            "music_styles": sorted(style.code for style in draft.music_styles),
            "message": draft.message,
        }
