"""Submission sink that only records the submission in the application log."""

import logging

from band.domain import ContactSubmission
from band.stores.interfaces import SubmissionSink

logger = logging.getLogger(__name__)


class LoggingSubmissionSink(SubmissionSink):
    """Logs the captured fields locally. Nothing leaves the process."""

    def deliver(self, submission: ContactSubmission) -> None:
        logger.info("Formulario enviado: %s", submission.as_log_dict())
