"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from band.domain import ContactSubmission, PageState


class PageStateStore(ABC):
    """Interface for loading and saving the page state of one visitor."""

    @abstractmethod
    def load(self) -> PageState:
        """Return the stored snapshot, or a fresh PageState if there is none."""
        ...

    @abstractmethod
    def save(self, state: PageState) -> None:
        """Replace the stored snapshot."""
        ...


class SubmissionSink(ABC):
    """Interface for handing over an accepted contact submission."""

    @abstractmethod
    def deliver(self, submission: ContactSubmission) -> None:
        """Deliver the submission.

        Raises:
            SubmissionDeliveryError: If the submission could not be handed over.
        """
        ...
