"""Template filters used by the presentational templates."""

import math
from datetime import date

from django import template

from band.domain import FeedbackKind, SubmissionFeedback

register = template.Library()

FEEDBACK_CLASSES = {
    FeedbackKind.SUCCESS: "bg-green-500 text-white",
    FeedbackKind.ERROR: "bg-red-500 text-white",
    FeedbackKind.NONE: "",
}

BUTTON_BASE_CLASSES = "font-bold py-3 px-8 rounded-full text-lg shadow-lg transition-all duration-300"


@register.filter
def feedback_classes(feedback: SubmissionFeedback) -> str:
    return FEEDBACK_CLASSES[feedback.kind]


@register.filter
def button_classes(extra: str = "") -> str:
    return f"{BUTTON_BASE_CLASSES} {extra}".strip()


@register.filter
def input_value(value) -> str:
    """Render a bound or initial field value for an input's value attribute."""
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


@register.filter
def contains(values, item) -> bool:
    return item in (values or ())


@register.filter
def refresh_seconds(seconds: float) -> int:
    # never 0: a zero refresh would reload in a loop
    return max(math.ceil(seconds), 1)
