"""Integration tests for the HTML site.

These drive the page through the Django test client, the way a browser
without JavaScript would.
Run with: pytest tests/test_site.py -v
"""

import re

import pytest

from band.domain import MusicStyle
from band.domain.models import SUCCESS_MESSAGE

REQUIRED_FIELDS = ["name", "email", "event_type", "event_date", "event_location"]


class TestPage:
    """Tests for GET /"""

    def test_renders_all_sections(self, client, wired):
        """The page contains every navigation anchor and the content."""
        response = client.get("/")
        html = response.content.decode()
        assert response.status_code == 200
        for anchor in ["inicio", "nosotros", "musica", "servicios", "contacto"]:
            assert f'id="{anchor}"' in html
        assert "Juan Pérez" in html
        assert "Paquetes Personalizados" in html
        assert "contacto@vintagegroup.com" in html

    def test_no_feedback_before_submission(self, client, wired):
        """The feedback slot is not rendered before any submission."""
        html = client.get("/").content.decode()
        assert 'id="form-feedback"' not in html
        assert 'http-equiv="refresh"' not in html

    @pytest.mark.parametrize("field", REQUIRED_FIELDS)
    def test_required_fields_marked_for_browser(self, client, wired, field):
        """Each required field carries the required attribute."""
        html = client.get("/").content.decode()
        assert re.search(rf'<(input|select)[^>]*name="{field}"[^>]*\srequired>', html)

    def test_optional_fields_not_marked(self, client, wired):
        """Phone and message are not required by the browser."""
        html = client.get("/").content.decode()
        assert not re.search(r'<input[^>]*name="phone"[^>]*\srequired>', html)
        assert not re.search(r'<textarea[^>]*name="message"[^>]*\srequired>', html)


class TestMenu:
    """Tests for the mobile navigation toggle."""

    def test_menu_closed_initially(self, client, wired):
        """The mobile menu is not rendered on first load."""
        assert 'id="mobile-menu"' not in client.get("/").content.decode()

    def test_toggle_opens_then_closes(self, client, wired):
        """Each toggle flips the menu visibility."""
        response = client.post("/menu/toggle")
        assert response.status_code == 302
        assert 'id="mobile-menu"' in client.get("/").content.decode()

        client.post("/menu/toggle")
        assert 'id="mobile-menu"' not in client.get("/").content.decode()

    def test_menu_link_closes_menu(self, client, wired):
        """Following a menu link closes the menu and jumps to the section."""
        client.post("/menu/toggle")
        response = client.get("/go/servicios")
        assert response.status_code == 302
        assert response["Location"] == "/#servicios"
        assert 'id="mobile-menu"' not in client.get("/").content.decode()

    def test_unknown_section_is_404(self, client, wired):
        """An unknown anchor is not found."""
        assert client.get("/go/tienda").status_code == 404


class TestContactForm:
    """Tests for POST /contact"""

    def test_valid_submission_redirects_and_shows_success(self, client, wired, form_data):
        """A valid submission shows the success feedback and an empty form."""
        response = client.post("/contact", form_data)
        assert response.status_code == 302
        assert response["Location"] == "/#contacto"

        html = client.get("/").content.decode()
        assert SUCCESS_MESSAGE in html
        assert "bg-green-500" in html
        assert 'name="name" value=""' in html
        assert 'http-equiv="refresh" content="5"' in html

    def test_captures_checked_music_styles(self, client, wired, form_data):
        """The captured styles are exactly the checked ones."""
        _, sink = wired
        client.post("/contact", form_data)
        assert sink.delivered[0].music_styles == {MusicStyle.ROCK, MusicStyle.JAZZ}

    @pytest.mark.parametrize("field", REQUIRED_FIELDS)
    def test_missing_required_field_never_submits(self, client, wired, form_data, field):
        """The form layer rejects a missing required field before submit."""
        _, sink = wired
        form_data[field] = ""
        response = client.post("/contact", form_data)
        assert response.status_code == 400
        assert sink.delivered == []
        assert SUCCESS_MESSAGE not in response.content.decode()

    def test_optional_fields_may_be_empty(self, client, wired, form_data):
        """Phone, styles and message are optional."""
        _, sink = wired
        del form_data["music_styles"]
        client.post("/contact", form_data)
        assert sink.delivered[0].music_styles == frozenset()
        assert sink.delivered[0].phone == ""

    def test_invalid_submission_keeps_values(self, client, wired, form_data):
        """A rejected form is re-rendered with what the visitor typed."""
        form_data["email"] = ""
        html = client.post("/contact", form_data).content.decode()
        assert 'value="Ana Rojas"' in html

    def test_rejected_form_does_not_auto_refresh(self, client, wired, form_data):
        """A rejected form is not reloaded away while earlier feedback is showing."""
        client.post("/contact", form_data)
        form_data["email"] = "not-an-email"
        response = client.post("/contact", form_data)
        html = response.content.decode()
        assert response.status_code == 400
        assert SUCCESS_MESSAGE in html
        assert 'http-equiv="refresh"' not in html
        assert 'value="not-an-email"' in html

    def test_feedback_gone_after_delay(self, client, wired, form_data):
        """The feedback is cleared 5 seconds after the submission."""
        clock, _ = wired
        client.post("/contact", form_data)
        clock.advance(4)
        assert SUCCESS_MESSAGE in client.get("/").content.decode()
        clock.advance(1)
        assert SUCCESS_MESSAGE not in client.get("/").content.decode()

    def test_resubmission_restarts_window(self, client, wired, form_data):
        """A second submission keeps the feedback past the first deadline."""
        clock, _ = wired
        client.post("/contact", form_data)
        clock.advance(3)
        client.post("/contact", form_data)
        clock.advance(4)
        assert SUCCESS_MESSAGE in client.get("/").content.decode()

    def test_delivery_error_shows_negative_feedback(self, client, wired, monkeypatch, failing_sink, form_data):
        """A failed delivery shows the error style and keeps the form values."""
        monkeypatch.setattr("band.handlers.dependencies.get_sink", lambda: failing_sink)
        client.post("/contact", form_data)
        html = client.get("/").content.decode()
        assert "bg-red-500" in html
        assert SUCCESS_MESSAGE not in html
        assert 'value="Ana Rojas"' in html


class TestFeedbackClear:
    """Tests for POST /feedback/clear/{token}"""

    def test_stale_token_keeps_feedback(self, client, wired, form_data):
        """Clearing with a token that is not pending changes nothing."""
        client.post("/contact", form_data)
        client.post("/feedback/clear/deadbeef")
        assert SUCCESS_MESSAGE in client.get("/").content.decode()

    def test_dismiss_clears_feedback(self, client, wired, form_data):
        """The dismiss button posts the pending token and clears the feedback."""
        client.post("/contact", form_data)
        html = client.get("/").content.decode()
        match = re.search(r'action="(/feedback/clear/[0-9a-f]+)"', html)
        assert match is not None

        response = client.post(match.group(1))
        assert response.status_code == 302
        assert SUCCESS_MESSAGE not in client.get("/").content.decode()
