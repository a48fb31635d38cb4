"""Page controller - single owner of the view state of one visitor."""

from band.domain import ContactSubmission, Outcome, PageState, Section
from band.services.contact_service import ContactService
from band.services.navigation_service import NavigationService
from band.stores.interfaces import PageStateStore


class PageController:
    """Loads the visitor's PageState, applies transitions and saves them back.

    Any due feedback clear is applied when the state is first read, so every
    render sees the current snapshot.
    """

    def __init__(
        self,
        store: PageStateStore,
        navigation: NavigationService,
        contact: ContactService,
    ) -> None:
        self._store = store
        self._navigation = navigation
        self._contact = contact
        self._state: PageState | None = None

    @property
    def state(self) -> PageState:
        if self._state is None:
            loaded = self._store.load()
            self._state = self._contact.expire_feedback(loaded)
            if self._state != loaded:
                self._store.save(self._state)
        return self._state

    @property
    def seconds_until_clear(self) -> float:
        return self._contact.seconds_remaining(self.state)

    def toggle_menu(self) -> PageState:
        return self._commit(self._navigation.toggle_menu(self.state))

    def follow_link(self, anchor: str) -> Section:
        state, section = self._navigation.follow_link(self.state, anchor)
        self._commit(state)
        return section

    def submit(self, fields: ContactSubmission) -> Outcome:
        outcome, state = self._contact.submit(self.state, fields)
        self._commit(state)
        return outcome

    def clear_feedback(self, token: str) -> PageState:
        return self._commit(self._contact.fire_clear(self.state, token))

    def _commit(self, state: PageState) -> PageState:
        self._state = state
        self._store.save(state)
        return state
