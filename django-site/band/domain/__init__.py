from band.domain.models import (
    ContactDetails,
    ContactSubmission,
    Error,
    Member,
    NavigationState,
    Outcome,
    PageState,
    PendingClear,
    Service,
    SiteContent,
    SocialLink,
    Song,
    SubmissionFeedback,
    Success,
    Video,
)
from band.domain.value_objects import EventType, FeedbackKind, MusicStyle, Section

__all__ = [
    "ContactDetails",
    "ContactSubmission",
    "Error",
    "EventType",
    "FeedbackKind",
    "Member",
    "MusicStyle",
    "NavigationState",
    "Outcome",
    "PageState",
    "PendingClear",
    "Section",
    "Service",
    "SiteContent",
    "SocialLink",
    "Song",
    "SubmissionFeedback",
    "Success",
    "Video",
]
