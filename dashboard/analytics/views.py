import pandas as pd

from domain.labels import (
    PARTICIPANT_STATUS_LABELS,
    batch_status_label,
    needs_labels,
    purpose_label,
    request_status_label,
)

REQUEST_COLUMNS = ["id", "destination", "objet", "dates", "participants", "objets", "statut"]
BATCH_COLUMNS = ["id", "nom", "destination", "debut", "fin", "statut", "voyageurs", "budget"]
WEEKDAYS = ["Lun", "Mar", "Mer", "Jeu", "Ven", "Sam", "Dim"]


def _format_destination(location) -> str:
    if not location.pays:
        return location.ville
    return f"{location.ville}, {location.pays}"


def _format_dates(dates, date_format: str) -> str:
    if dates.du is None or dates.au is None:
        return ""
    return f"{dates.du.strftime(date_format)} - {dates.au.strftime(date_format)}"


def _format_participants(participants) -> str:
    if not participants:
        return "Aucun participant"
    return ", ".join(
        f"{p.name} ({PARTICIPANT_STATUS_LABELS[p.status]})" for p in participants
    )


def requests_table(requests, participants=None, date_format: str = "%d/%m") -> pd.DataFrame:
    """Tabular view of requests: one row per request, input order kept."""
    participants = participants or {}
    rows = [
        {
            "id": r.id,
            "destination": _format_destination(r.location),
            "objet": purpose_label(r.purpose),
            "dates": _format_dates(r.dates, date_format),
            "participants": _format_participants(participants.get(r.id)),
            "objets": ", ".join(needs_labels(r.needs)),
            "statut": request_status_label(r.status),
        }
        for r in requests
    ]
    return pd.DataFrame(rows, columns=REQUEST_COLUMNS)


def batches_table(batches) -> pd.DataFrame:
    rows = [
        {
            "id": b.id,
            "nom": b.name,
            "destination": b.destination,
            "debut": b.start_date,
            "fin": b.end_date,
            "statut": batch_status_label(b.status),
            "voyageurs": len(b.travelers),
            "budget": b.budget,
        }
        for b in batches
    ]
    return pd.DataFrame(rows, columns=BATCH_COLUMNS)


def _format_day(day) -> str:
    text = f"{day.date.day:02d}"
    if day.is_today:
        text += "*"
    if day.batches:
        text += ": " + "; ".join(b.name for b in day.batches)
    return text


def calendar_table(weeks) -> pd.DataFrame:
    """Calendar grid: one row per week, one column per weekday (Monday first)."""
    rows = [[_format_day(day) for day in week] for week in weeks]
    index = [week[0].date.isoformat() for week in weeks]
    return pd.DataFrame(rows, columns=WEEKDAYS, index=pd.Index(index, name="semaine"))
