"""Domain models for the page state and the site content.

These are pure domain objects with no Django imports.
Request parsing lives in band/handlers (forms and serializers).
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, Self

from band.domain.value_objects import EventType, FeedbackKind, MusicStyle

SUCCESS_MESSAGE = "¡Gracias por tu mensaje! Nos pondremos en contacto contigo pronto."


@dataclass(frozen=True)
class NavigationState:
    """Visibility of the collapsible mobile navigation panel."""

    is_open: bool = False

    def toggled(self) -> Self:
        return replace(self, is_open=not self.is_open)


@dataclass(frozen=True)
class SubmissionFeedback:
    """Message shown after a contact submission.

    ``kind`` is NONE if and only if ``message`` is empty.
    """

    message: str = ""
    kind: FeedbackKind = FeedbackKind.NONE

    def __post_init__(self) -> None:
        if (self.kind is FeedbackKind.NONE) != (self.message == ""):
            raise ValueError("Feedback kind must be NONE exactly when message is empty")

    @classmethod
    def none(cls) -> Self:
        return cls()

    @property
    def visible(self) -> bool:
        return self.kind is not FeedbackKind.NONE


@dataclass(frozen=True)
class ContactSubmission:
    """Field values captured from the contact form at submission time."""

    name: str
    email: str
    event_type: EventType
    event_date: date
    event_location: str
    phone: str = ""
    music_styles: frozenset[MusicStyle] = frozenset()
    message: str = ""

    def as_log_dict(self) -> dict[str, Any]:
        """Return the captured values keyed the way the submission log prints them."""
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "eventType": self.event_type.code,
            "musicStyle": sorted(style.code for style in self.music_styles),
            "eventDate": self.event_date.isoformat(),
            "eventLocation": self.event_location,
            "message": self.message,
        }


@dataclass(frozen=True)
class Success:
    """Outcome of an accepted submission."""

    message: str = SUCCESS_MESSAGE

    def feedback(self) -> SubmissionFeedback:
        return SubmissionFeedback(message=self.message, kind=FeedbackKind.SUCCESS)


@dataclass(frozen=True)
class Error:
    """Outcome of a submission that could not be delivered."""

    message: str

    def feedback(self) -> SubmissionFeedback:
        return SubmissionFeedback(message=self.message, kind=FeedbackKind.ERROR)


Outcome = Success | Error


@dataclass(frozen=True)
class PendingClear:
    """Handle of the scheduled feedback clear."""

    token: str
    due_at: datetime


@dataclass(frozen=True)
class PageState:
    """Snapshot of the view state owned by the page controller."""

    navigation: NavigationState = field(default_factory=NavigationState)
    feedback: SubmissionFeedback = field(default_factory=SubmissionFeedback.none)
    pending_clear: PendingClear | None = None
    draft: ContactSubmission | None = None

    def __post_init__(self) -> None:
        if self.pending_clear is not None and not self.feedback.visible:
            raise ValueError("A pending clear requires visible feedback")


# --- Site content ---


@dataclass(frozen=True)
class Member:
    img_src: str
    name: str
    role: str
    description: str


@dataclass(frozen=True)
class Song:
    title: str
    description: str
    audio_src: str
    spotify_link: str


@dataclass(frozen=True)
class Video:
    youtube_embed_url: str
    title: str
    description: str


@dataclass(frozen=True)
class Service:
    icon: str
    title: str
    description: str
    features: tuple[str, ...] = ()


@dataclass(frozen=True)
class SocialLink:
    href: str
    icon_src: str
    alt: str


@dataclass(frozen=True)
class ContactDetails:
    intro_text: str
    email: str
    phone: str
    social_links: tuple[SocialLink, ...] = ()


@dataclass(frozen=True)
class SiteContent:
    """Everything the page displays apart from the view state."""

    band_name: str
    hero_subtitle: str
    hero_background: str
    about_description: str
    music_intro: str
    services_intro: str
    services_cta_text: str
    members: tuple[Member, ...]
    songs: tuple[Song, ...]
    videos: tuple[Video, ...]
    services: tuple[Service, ...]
    contact: ContactDetails
