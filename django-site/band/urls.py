from django.urls import path

from band.handlers import (
    ContactApiView,
    ContactView,
    ContentView,
    FeedbackClearView,
    MenuToggleApiView,
    MenuToggleView,
    PageStateView,
    PageView,
    SectionLinkView,
)

app_name = "band"

urlpatterns = [
    path("", PageView.as_view(), name="page"),
    path("menu/toggle", MenuToggleView.as_view(), name="menu-toggle"),
    path("go/<str:anchor>", SectionLinkView.as_view(), name="section-link"),
    path("contact", ContactView.as_view(), name="contact"),
    path("feedback/clear/<str:token>", FeedbackClearView.as_view(), name="feedback-clear"),
    path("api/state", PageStateView.as_view(), name="api-state"),
    path("api/menu/toggle", MenuToggleApiView.as_view(), name="api-menu-toggle"),
    path("api/contact", ContactApiView.as_view(), name="api-contact"),
    path("api/content", ContentView.as_view(), name="api-content"),
]
