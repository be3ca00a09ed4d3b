from datetime import datetime

from domain.models import RequestStatus, TravelRequest
from domain.ports import NotificationPort
from domain.request_service import RequestService


class _RecordingNotifier(NotificationPort):
    def __init__(self):
        self.titles = []

    def notify(self, title, description):
        self.titles.append(title)


def _service():
    notifier = _RecordingNotifier()
    return RequestService(notifier), notifier


def test_save_notifies_draft_saved():
    service, notifier = _service()
    result = service.save([], TravelRequest(id="1"))
    assert [r.id for r in result] == ["1"]
    assert notifier.titles == ["Brouillon sauvegardé"]


def test_send_marks_sent_and_notifies():
    service, notifier = _service()
    result = service.send([TravelRequest(id="1")], TravelRequest(id="1"))
    assert result[0].status is RequestStatus.SENT
    assert notifier.titles == ["Demande envoyée"]


def test_delete_notifies():
    service, notifier = _service()
    result = service.delete([TravelRequest(id="1")], "1")
    assert result == []
    assert notifier.titles == ["Demande supprimée"]


def test_comment_uses_service_author():
    service, notifier = _service()
    requests = [TravelRequest(id="1", status=RequestStatus.SENT)]
    result = service.comment(requests, "1", "Parfait, merci !", datetime(2024, 2, 11))
    assert result[0].comments[0].author == "Vous"
    assert notifier.titles == ["Commentaire ajouté"]


def test_blank_comment_does_not_notify():
    service, notifier = _service()
    requests = [TravelRequest(id="1")]
    result = service.comment(requests, "1", "  ", datetime(2024, 2, 11))
    assert result == requests
    assert notifier.titles == []


def test_missing_comment_text_does_not_notify():
    service, notifier = _service()
    requests = [TravelRequest(id="1", status=RequestStatus.SENT)]
    result = service.comment(requests, "1", None, datetime(2024, 2, 11))
    assert result == requests
    assert notifier.titles == []
