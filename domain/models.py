"""Domain models — pure Python, zero external dependencies.

Only stdlib imports allowed: dataclasses, datetime, enum.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class Purpose(Enum):
    """Reason for the trip, as chosen in the request form."""

    SALON = "salon"
    VISITE_CLIENT = "visite-client"
    AUTRES = "autres"


class RequestStatus(Enum):
    """Lifecycle of a travel request: draft -> sent -> validated."""

    DRAFT = "draft"
    SENT = "sent"
    VALIDATED = "validated"


class BatchStatus(Enum):
    """Lifecycle of a travel batch."""

    PLANNING = "planning"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class ArrivalPreference(Enum):
    MATIN = "matin"
    VEILLE_SOIR = "veille-soir"
    LES_DEUX = "les-deux"


class DeparturePreference(Enum):
    SOIR = "soir"
    LENDEMAIN = "lendemain"
    LES_DEUX = "les-deux"


class ParticipantStatus(Enum):
    """Answer of a participant invited on a request."""

    CONFIRMED = "confirmed"
    PENDING = "pending"
    DECLINED = "declined"


# ── Value Objects ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    quartier: str = ""
    ville: str = ""
    pays: str = ""


@dataclass(frozen=True)
class DateRange:
    """Travel period; both bounds may be unset while the form is a draft."""

    du: date | None = None
    au: date | None = None


@dataclass(frozen=True)
class ArrivalSlot:
    date: date | None = None
    time: str = ""
    preference: ArrivalPreference = ArrivalPreference.MATIN
    precise_time: str = ""


@dataclass(frozen=True)
class DepartureSlot:
    date: date | None = None
    time: str = ""
    preference: DeparturePreference = DeparturePreference.SOIR
    precise_time: str = ""


@dataclass(frozen=True)
class HotelPreference:
    proche: str = ""


@dataclass(frozen=True)
class Needs:
    """Equipment requested for the trip."""

    carte_sim: bool = False
    ordinateur_voyage: bool = False


@dataclass(frozen=True)
class Comment:
    id: str
    author: str
    text: str
    date: datetime


# ── Entities ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TravelRequest:
    """A single travel request as edited in the request form.

    Immutable: edits go through ``domain.path_updater`` or
    ``domain.request_actions`` and produce a new instance.
    """

    id: str
    purpose: Purpose = Purpose.SALON
    location: Location = field(default_factory=Location)
    dates: DateRange = field(default_factory=DateRange)
    arrival: ArrivalSlot = field(default_factory=ArrivalSlot)
    departure: DepartureSlot = field(default_factory=DepartureSlot)
    hotel: HotelPreference = field(default_factory=HotelPreference)
    needs: Needs = field(default_factory=Needs)
    status: RequestStatus = RequestStatus.DRAFT
    comments: tuple[Comment, ...] = ()


@dataclass
class Traveler:
    """An employee who travels."""

    id: str
    name: str
    department: str
    current_trips: int = 0
    total_trips: int = 0
    email: str | None = None


@dataclass
class TravelBatch:
    """A group trip covering several travelers and a date range."""

    id: str
    name: str
    destination: str
    start_date: date
    end_date: date
    status: BatchStatus = BatchStatus.PLANNING
    travelers: tuple[Traveler, ...] = ()
    budget: float = 0.0


@dataclass(frozen=True)
class Participant:
    """A traveler as listed in the participants column of the request table."""

    id: str
    name: str
    role: str
    status: ParticipantStatus = ParticipantStatus.PENDING


# ── Result Value Objects ────────────────────────────────────────────────


@dataclass(frozen=True)
class Day:
    """One cell of the calendar grid."""

    date: date
    batches: tuple = ()
    is_today: bool = False


@dataclass(frozen=True)
class BatchStats:
    """Read-only counters shown on the home page."""

    total: int
    planning: int
    confirmed: int
    in_progress: int
    completed: int
    total_budget: float
    active_travelers: int
