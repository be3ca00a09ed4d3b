"""French display labels for domain enums.

Only stdlib and domain.models imports allowed.
"""

from domain.models import BatchStatus, ParticipantStatus, Purpose, RequestStatus

PURPOSE_LABELS = {
    Purpose.SALON: "Salon",
    Purpose.VISITE_CLIENT: "Visite client",
    Purpose.AUTRES: "Autres",
}

REQUEST_STATUS_LABELS = {
    RequestStatus.DRAFT: "Brouillon",
    RequestStatus.SENT: "Envoyée",
    RequestStatus.VALIDATED: "Validée",
}

BATCH_STATUS_LABELS = {
    BatchStatus.PLANNING: "Planification",
    BatchStatus.CONFIRMED: "Confirmé",
    BatchStatus.IN_PROGRESS: "En cours",
    BatchStatus.COMPLETED: "Terminé",
}

PARTICIPANT_STATUS_LABELS = {
    ParticipantStatus.CONFIRMED: "Confirmé",
    ParticipantStatus.PENDING: "En attente",
    ParticipantStatus.DECLINED: "Décliné",
}

NEEDS_LABELS = {
    "carte_sim": "Carte SIM",
    "ordinateur_voyage": "Ordinateur de voyage",
}


def purpose_label(purpose):
    return PURPOSE_LABELS[Purpose(purpose)]


def request_status_label(status):
    return REQUEST_STATUS_LABELS[RequestStatus(status)]


def batch_status_label(status):
    return BATCH_STATUS_LABELS[BatchStatus(status)]


def needs_labels(needs):
    """Labels of the requested equipment, laptop first as in the table view."""
    labels = []
    if needs.ordinateur_voyage:
        labels.append(NEEDS_LABELS["ordinateur_voyage"])
    if needs.carte_sim:
        labels.append(NEEDS_LABELS["carte_sim"])
    return labels
