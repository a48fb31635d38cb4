from band.handlers.api import ContactApiView, ContentView, MenuToggleApiView, PageStateView
from band.handlers.views import (
    ContactView,
    FeedbackClearView,
    MenuToggleView,
    PageView,
    SectionLinkView,
)

__all__ = [
    "ContactApiView",
    "ContactView",
    "ContentView",
    "FeedbackClearView",
    "MenuToggleApiView",
    "MenuToggleView",
    "PageStateView",
    "PageView",
    "SectionLinkView",
]
