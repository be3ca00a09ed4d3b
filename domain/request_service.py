"""Domain service for the request dashboard actions — pure Python, zero external dependencies."""

from __future__ import annotations

from datetime import datetime

from domain import request_actions
from domain.models import TravelRequest
from domain.ports import NotificationPort


class RequestService:
    """Request list actions that also notify the user.

    The service holds no request state: each method takes the current list
    and returns the next one, the caller keeps it.
    """

    def __init__(self, notifier: NotificationPort, author: str = "Vous"):
        self._notifier = notifier
        self._author = author

    def save(self, requests: list[TravelRequest], request: TravelRequest) -> list[TravelRequest]:
        result = request_actions.save_request(requests, request)
        self._notifier.notify(
            "Brouillon sauvegardé",
            "Votre demande de voyage a été sauvegardée en brouillon.",
        )
        return result

    def send(self, requests: list[TravelRequest], request: TravelRequest) -> list[TravelRequest]:
        result = request_actions.send_request(requests, request)
        self._notifier.notify(
            "Demande envoyée",
            "Votre demande de voyage a été envoyée avec succès.",
        )
        return result

    def delete(self, requests: list[TravelRequest], request_id: str) -> list[TravelRequest]:
        result = request_actions.delete_request(requests, request_id)
        self._notifier.notify(
            "Demande supprimée",
            "La demande de voyage a été supprimée avec succès.",
        )
        return result

    def comment(
        self,
        requests: list[TravelRequest],
        request_id: str,
        text: str,
        at: datetime,
    ) -> list[TravelRequest]:
        """Add a comment authored by the current user.

        Blank comments are ignored and do not notify.
        """
        if not text or not text.strip():
            return list(requests)
        result = request_actions.comment_on(requests, request_id, self._author, text, at)
        self._notifier.notify(
            "Commentaire ajouté",
            "Votre commentaire a été ajouté avec succès.",
        )
        return result
