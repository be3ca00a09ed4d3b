"""Demo data for the travel dashboard.

Same travelers, batches and requests as the mock data of the front-end.
Factories return fresh objects on each call.
"""

from datetime import date, datetime

from domain.models import (
    ArrivalPreference,
    ArrivalSlot,
    BatchStatus,
    Comment,
    DateRange,
    DeparturePreference,
    DepartureSlot,
    HotelPreference,
    Location,
    Needs,
    Participant,
    ParticipantStatus,
    Purpose,
    RequestStatus,
    Traveler,
    TravelBatch,
    TravelRequest,
)


def demo_travelers() -> list[Traveler]:
    return [
        Traveler(
            id="1", name="Marie Dubois", email="marie.dubois@company.com",
            department="Commercial", current_trips=2, total_trips=15,
        ),
        Traveler(
            id="2", name="Pierre Martin", email="pierre.martin@company.com",
            department="Marketing", current_trips=1, total_trips=8,
        ),
        Traveler(
            id="3", name="Sophie Laurent", email="sophie.laurent@company.com",
            department="R&D", current_trips=0, total_trips=12,
        ),
    ]


def demo_batches(travelers: list[Traveler] | None = None) -> list[TravelBatch]:
    t = travelers or demo_travelers()
    return [
        TravelBatch(
            id="1", name="Salon Tech Paris 2024", destination="Paris, France",
            travelers=(t[0], t[1]),
            start_date=date(2024, 3, 15), end_date=date(2024, 3, 18),
            status=BatchStatus.CONFIRMED, budget=8500,
        ),
        TravelBatch(
            id="2", name="Visite Client London", destination="Londres, UK",
            travelers=(t[2],),
            start_date=date(2024, 3, 22), end_date=date(2024, 3, 24),
            status=BatchStatus.PLANNING, budget=3200,
        ),
        TravelBatch(
            id="3", name="Conférence Berlin", destination="Berlin, Allemagne",
            travelers=(t[0],),
            start_date=date(2024, 4, 5), end_date=date(2024, 4, 7),
            status=BatchStatus.IN_PROGRESS, budget=4100,
        ),
    ]


def demo_participants() -> dict[str, list[Participant]]:
    """Participants per batch/request id, as listed in the table view."""
    return {
        "1": [
            Participant("t1", "Marie Dubois", "Chef de projet", ParticipantStatus.CONFIRMED),
            Participant("t2", "Pierre Martin", "Développeur", ParticipantStatus.CONFIRMED),
        ],
        "2": [
            Participant("t3", "Sophie Laurent", "Designer", ParticipantStatus.CONFIRMED),
        ],
        "3": [
            Participant("t4", "Marie Dubois", "Chef de projet", ParticipantStatus.CONFIRMED),
        ],
    }


def demo_requests() -> list[TravelRequest]:
    return [
        TravelRequest(
            id="1",
            purpose=Purpose.SALON,
            location=Location(quartier="La Défense", ville="Paris", pays="France"),
            dates=DateRange(du=date(2024, 3, 15), au=date(2024, 3, 18)),
            arrival=ArrivalSlot(
                date=date(2024, 3, 15), time="09:00",
                preference=ArrivalPreference.MATIN, precise_time="08:30",
            ),
            departure=DepartureSlot(
                date=date(2024, 3, 18), time="17:00",
                preference=DeparturePreference.SOIR, precise_time="18:00",
            ),
            hotel=HotelPreference(proche="Centre de congrès"),
            needs=Needs(carte_sim=True, ordinateur_voyage=False),
            status=RequestStatus.VALIDATED,
            comments=(
                Comment("1", "Intermédiaire", "Hôtel réservé au Marriott La Défense",
                        datetime(2024, 2, 10)),
                Comment("2", "Vous", "Parfait, merci !", datetime(2024, 2, 11)),
            ),
        ),
    ]
