"""Wiring of services and stores for a request."""

from datetime import timedelta

from django.conf import settings
from django.http import HttpRequest
from django.utils.module_loading import import_string

from band.services import Clock, ContactService, NavigationService, PageController, SystemClock
from band.stores import SessionPageStateStore, SubmissionSink


def get_clock() -> Clock:
    return SystemClock()


def get_sink() -> SubmissionSink:
    return import_string(settings.VINTAGE_SUBMISSION_SINK)()


def build_controller(request: HttpRequest) -> PageController:
    """Return the page controller bound to the visitor's session."""
    contact = ContactService(
        sink=get_sink(),
        clock=get_clock(),
        clear_after=timedelta(seconds=settings.VINTAGE_FEEDBACK_CLEAR_SECONDS),
    )
    return PageController(
        store=SessionPageStateStore(request.session),
        navigation=NavigationService(),
        contact=contact,
    )
