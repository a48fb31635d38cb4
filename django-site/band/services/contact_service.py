"""Contact service - the submission feedback state machine.

Services:
- Depend only on interfaces (sinks, clocks)
- Never validate form fields; the form layer does that before calling submit
- Return new PageState snapshots, never mutate the given one

A submission sets the feedback and schedules a single clear ``clear_after``
later. The schedule is a PendingClear handle; a new submission replaces the
handle, so a clear carrying an older token can never blank newer feedback.
"""

import logging
import uuid
from dataclasses import replace
from datetime import timedelta

from band.domain import (
    ContactSubmission,
    Error,
    Outcome,
    PageState,
    PendingClear,
    SubmissionFeedback,
    Success,
)
from band.domain.errors import SubmissionDeliveryError
from band.services.clock import Clock
from band.stores.interfaces import SubmissionSink

logger = logging.getLogger(__name__)

DEFAULT_CLEAR_AFTER = timedelta(seconds=5)


class ContactService:
    """Service for contact form submissions."""

    def __init__(
        self,
        sink: SubmissionSink,
        clock: Clock,
        clear_after: timedelta = DEFAULT_CLEAR_AFTER,
    ) -> None:
        self._sink = sink
        self._clock = clock
        self._clear_after = clear_after

    def submit(self, state: PageState, fields: ContactSubmission) -> tuple[Outcome, PageState]:
        """Accept a submission and show its feedback.

        On success the form draft is cleared. On a delivery error the draft
        keeps the submitted values so the visitor can retry.
        """
        state = self.expire_feedback(state)
        outcome: Outcome
        try:
            self._sink.deliver(fields)
        except SubmissionDeliveryError as exc:
            logger.warning("Contact submission not delivered: %s", exc)
            outcome = Error(exc.message)
            draft = fields
        else:
            outcome = Success()
            draft = None

        if state.pending_clear is not None:
            logger.debug("Superseding pending feedback clear %s", state.pending_clear.token)
        pending = PendingClear(
            token=uuid.uuid4().hex,
            due_at=self._clock.now() + self._clear_after,
        )
        return outcome, replace(
            state,
            feedback=outcome.feedback(),
            pending_clear=pending,
            draft=draft,
        )

    def expire_feedback(self, state: PageState) -> PageState:
        """Run the pending clear if it is due."""
        pending = state.pending_clear
        if pending is None or self._clock.now() < pending.due_at:
            return state
        return self.fire_clear(state, pending.token)

    def fire_clear(self, state: PageState, token: str) -> PageState:
        """Clear the feedback if ``token`` is the pending one."""
        pending = state.pending_clear
        if pending is None or pending.token != token:
            logger.debug("Ignoring stale feedback clear %s", token)
            return state
        return replace(state, feedback=SubmissionFeedback.none(), pending_clear=None)

    def seconds_remaining(self, state: PageState) -> float:
        """Seconds until the pending clear is due, 0 when nothing is pending."""
        pending = state.pending_clear
        if pending is None:
            return 0.0
        return max((pending.due_at - self._clock.now()).total_seconds(), 0.0)
