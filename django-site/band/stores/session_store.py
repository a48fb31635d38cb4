"""Session-backed implementation of the PageStateStore.

The snapshot is stored as a JSON-safe dict so it works with the
signed-cookie session backend. Nothing is kept server-side.
"""

import logging
from datetime import date, datetime
from typing import Any

from django.contrib.sessions.backends.base import SessionBase

from band.domain import (
    ContactSubmission,
    EventType,
    FeedbackKind,
    MusicStyle,
    NavigationState,
    PageState,
    PendingClear,
    SubmissionFeedback,
)
from band.domain.errors import InvalidPageStateError
from band.stores.interfaces import PageStateStore

logger = logging.getLogger(__name__)

SESSION_KEY = "vintage.page_state"


def encode_page_state(state: PageState) -> dict[str, Any]:
    pending = state.pending_clear
    return {
        "menu_open": state.navigation.is_open,
        "feedback": {
            "message": state.feedback.message,
            "kind": state.feedback.kind.value,
        },
        "pending_clear": (
            {"token": pending.token, "due_at": pending.due_at.isoformat()}
            if pending is not None
            else None
        ),
        "draft": _encode_draft(state.draft) if state.draft is not None else None,
    }


def decode_page_state(data: Any) -> PageState:
    """Rebuild a PageState from its encoded form.

    Raises:
        InvalidPageStateError: If the payload is malformed.
    """
    try:
        feedback = SubmissionFeedback(
            message=data["feedback"]["message"],
            kind=FeedbackKind(data["feedback"]["kind"]),
        )
        pending = data.get("pending_clear")
        draft = data.get("draft")
        return PageState(
            navigation=NavigationState(is_open=bool(data["menu_open"])),
            feedback=feedback,
            pending_clear=(
                PendingClear(
                    token=str(pending["token"]),
                    due_at=datetime.fromisoformat(pending["due_at"]),
                )
                if pending
                else None
            ),
            draft=_decode_draft(draft) if draft else None,
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise InvalidPageStateError() from exc


def _encode_draft(draft: ContactSubmission) -> dict[str, Any]:
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


def _decode_draft(data: dict[str, Any]) -> ContactSubmission:
    return ContactSubmission(
        name=data["name"],
        email=data["email"],
        phone=data.get("phone", ""),
        event_type=EventType.from_code(data["event_type"]),
        event_date=date.fromisoformat(data["event_date"]),
        event_location=data["event_location"],
        music_styles=frozenset(MusicStyle.from_code(code) for code in data.get("music_styles", [])),
        message=data.get("message", ""),
    )


class SessionPageStateStore(PageStateStore):
    """Keeps the page state of one visitor in their Django session."""

    def __init__(self, session: SessionBase) -> None:
        self._session = session

    def load(self) -> PageState:
        data = self._session.get(SESSION_KEY)
        if data is None:
            return PageState()
        try:
            return decode_page_state(data)
        except InvalidPageStateError:
            logger.warning("Discarding undecodable page state from session")
            return PageState()

    def save(self, state: PageState) -> None:
        self._session[SESSION_KEY] = encode_page_state(state)
