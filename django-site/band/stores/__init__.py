from band.stores.interfaces import PageStateStore, SubmissionSink
from band.stores.logging_sink import LoggingSubmissionSink
from band.stores.session_store import SessionPageStateStore

__all__ = [
    "LoggingSubmissionSink",
    "PageStateStore",
    "SessionPageStateStore",
    "SubmissionSink",
]
