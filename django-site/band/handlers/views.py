"""HTTP handlers (views) for the HTML site - handle HTTP concerns only.

Handlers:
- Parse requests and validate input through ContactForm
- Call the page controller for every state change
- Map domain errors to HTTP responses
- Redirect after every POST so a reload never resubmits
"""

from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views import View

from band.content import SITE_CONTENT
from band.domain import Section
from band.domain.errors import UnknownSectionError
from band.handlers.dependencies import build_controller
from band.handlers.forms import ContactForm
from band.services import PageController


def render_page(
    request: HttpRequest,
    controller: PageController,
    form: ContactForm | None = None,
    status: int = 200,
) -> HttpResponse:
    state = controller.state
    if form is None:
        form = ContactForm(initial=ContactForm.initial_from(state.draft))
    context = {
        "content": SITE_CONTENT,
        "sections": list(Section),
        "state": state,
        "feedback": state.feedback,
        "clears_in": controller.seconds_until_clear,
        "form": form,
        "auto_refresh": not form.is_bound,
    }
    return render(request, "band/index.html", context, status=status)


class PageView(View):
    """Handler for GET /"""

    def get(self, request: HttpRequest) -> HttpResponse:
        return render_page(request, build_controller(request))


class MenuToggleView(View):
    """Handler for POST /menu/toggle"""

    def post(self, request: HttpRequest) -> HttpResponse:
        build_controller(request).toggle_menu()
        return redirect("band:page")


class SectionLinkView(View):
    """Handler for GET /go/{anchor} - menu links close the mobile menu."""

    def get(self, request: HttpRequest, anchor: str) -> HttpResponse:
        try:
            section = build_controller(request).follow_link(anchor)
        except UnknownSectionError:
            raise Http404("Section not found")
        return redirect(f"{reverse('band:page')}#{section.anchor}")


class ContactView(View):
    """Handler for POST /contact"""

    def post(self, request: HttpRequest) -> HttpResponse:
        controller = build_controller(request)
        form = ContactForm(request.POST)
        if not form.is_valid():
            return render_page(request, controller, form=form, status=400)

        controller.submit(form.to_submission())
        return redirect(f"{reverse('band:page')}#{Section.CONTACT.anchor}")


class FeedbackClearView(View):
    """Handler for POST /feedback/clear/{token}"""

    def post(self, request: HttpRequest, token: str) -> HttpResponse:
        build_controller(request).clear_feedback(token)
        return redirect(f"{reverse('band:page')}#{Section.CONTACT.anchor}")
