"""Batch to request projection — pure functions, zero external dependencies.

Only stdlib and domain.models imports allowed.
"""

from __future__ import annotations

from domain.models import (
    ArrivalPreference,
    ArrivalSlot,
    BatchStatus,
    DateRange,
    DeparturePreference,
    DepartureSlot,
    HotelPreference,
    Location,
    Needs,
    Purpose,
    RequestStatus,
    TravelRequest,
)

# A request has no "in progress" or "completed" state: both map to validated.
STATUS_PROJECTION = {
    BatchStatus.PLANNING: RequestStatus.DRAFT,
    BatchStatus.CONFIRMED: RequestStatus.SENT,
    BatchStatus.IN_PROGRESS: RequestStatus.VALIDATED,
    BatchStatus.COMPLETED: RequestStatus.VALIDATED,
}

DEFAULT_ARRIVAL_TIME = "09:00"
DEFAULT_ARRIVAL_PRECISE_TIME = "08:30"
DEFAULT_DEPARTURE_TIME = "17:00"
DEFAULT_DEPARTURE_PRECISE_TIME = "18:00"
DEFAULT_HOTEL = "Centre-ville"

DEFAULT_NEEDS = Needs(carte_sim=False, ordinateur_voyage=False)


def classify_purpose(name):
    """Guess the trip purpose from a batch name ("salon" wins over "visite")."""
    lowered = name.lower()
    if "salon" in lowered:
        return Purpose.SALON
    if "visite" in lowered:
        return Purpose.VISITE_CLIENT
    return Purpose.AUTRES


def split_destination(destination):
    """Split "City, Country" on the first comma into a Location."""
    ville, sep, pays = destination.partition(",")
    return Location(quartier="", ville=ville.strip(), pays=pays.strip() if sep else "")


def project_status(status):
    return STATUS_PROJECTION[BatchStatus(status)]


def _resolve_needs(needs_policy, batch):
    if needs_policy is None:
        return DEFAULT_NEEDS
    if isinstance(needs_policy, Needs):
        return needs_policy
    return needs_policy(batch)


def project_batch(batch, needs_policy=None):
    """Project one batch onto the request shape used by the table view."""
    return TravelRequest(
        id=batch.id,
        purpose=classify_purpose(batch.name),
        location=split_destination(batch.destination),
        dates=DateRange(du=batch.start_date, au=batch.end_date),
        arrival=ArrivalSlot(
            date=batch.start_date,
            time=DEFAULT_ARRIVAL_TIME,
            preference=ArrivalPreference.MATIN,
            precise_time=DEFAULT_ARRIVAL_PRECISE_TIME,
        ),
        departure=DepartureSlot(
            date=batch.end_date,
            time=DEFAULT_DEPARTURE_TIME,
            preference=DeparturePreference.SOIR,
            precise_time=DEFAULT_DEPARTURE_PRECISE_TIME,
        ),
        hotel=HotelPreference(proche=DEFAULT_HOTEL),
        needs=_resolve_needs(needs_policy, batch),
        status=project_status(batch.status),
        comments=(),
    )


def project(batches, needs_policy=None):
    """Project batches onto requests, preserving input order.

    Args:
        batches: Iterable of TravelBatch.
        needs_policy: ``Needs`` applied to every request, or a callable
            ``batch -> Needs``. Defaults to no SIM card and no laptop.
    """
    return [project_batch(batch, needs_policy) for batch in batches]
