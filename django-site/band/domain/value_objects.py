"""Domain primitives that enforce validity at creation time."""

from enum import Enum
from typing import Self

from band.domain.errors import UnknownSectionError


class FeedbackKind(Enum):
    """Kind of feedback shown after a contact submission."""

    NONE = ""
    SUCCESS = "success"
    ERROR = "error"


class EventType(Enum):
    """Event types offered in the contact form."""

    WEDDING = ("boda", "Boda")
    CORPORATE = ("corporativo", "Evento Corporativo")
    PRIVATE_PARTY = ("fiesta-privada", "Fiesta Privada")
    FESTIVAL = ("festival", "Festival / Concierto")
    OTHER = ("otro", "Otro")

    def __init__(self, code: str, label: str) -> None:
        self.code = code
        self.label = label

    @classmethod
    def from_code(cls, code: str) -> Self:
        for member in cls:
            if member.code == code:
                return member
        raise ValueError(f"Unknown event type: {code!r}")

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        return [(member.code, member.label) for member in cls]


class MusicStyle(Enum):
    """Music styles a client can ask for."""

    ROCK = ("rock", "Rock")
    POP = ("pop", "Pop")
    JAZZ = ("jazz", "Jazz")
    FOLK = ("folclore", "Folclore")
    ELECTRONIC = ("electronica", "Electrónica")
    VARIOUS = ("varios", "Varios")
    OTHER = ("otro", "Otro")

    def __init__(self, code: str, label: str) -> None:
        self.code = code
        self.label = label

    @classmethod
    def from_code(cls, code: str) -> Self:
        for member in cls:
            if member.code == code:
                return member
        raise ValueError(f"Unknown music style: {code!r}")

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        return [(member.code, member.label) for member in cls]


class Section(Enum):
    """Fixed page sections reachable from the navigation."""

    HOME = ("inicio", "Inicio")
    ABOUT = ("nosotros", "Nosotros")
    MUSIC = ("musica", "Música")
    SERVICES = ("servicios", "Servicios")
    CONTACT = ("contacto", "Contacto")

    def __init__(self, anchor: str, label: str) -> None:
        self.anchor = anchor
        self.label = label

    @classmethod
    def from_anchor(cls, anchor: str) -> Self:
        for member in cls:
            if member.anchor == anchor:
                return member
        raise UnknownSectionError(anchor)
