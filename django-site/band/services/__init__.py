from band.services.clock import Clock, SystemClock
from band.services.contact_service import ContactService
from band.services.navigation_service import NavigationService
from band.services.page_controller import PageController

__all__ = [
    "Clock",
    "ContactService",
    "NavigationService",
    "PageController",
    "SystemClock",
]
