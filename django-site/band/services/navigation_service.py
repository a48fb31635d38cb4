"""Navigation service - mobile menu visibility."""

from dataclasses import replace

from band.domain import PageState, Section


class NavigationService:
    """Service for the collapsible navigation panel."""

    def toggle_menu(self, state: PageState) -> PageState:
        """Flip the menu visibility."""
        return replace(state, navigation=state.navigation.toggled())

    def follow_link(self, state: PageState, anchor: str) -> tuple[PageState, Section]:
        """Resolve a menu link and close the menu.

        Raises:
            UnknownSectionError: If the anchor is not a page section.
        """
        section = Section.from_anchor(anchor)
        if state.navigation.is_open:
            state = self.toggle_menu(state)
        return state, section
