from datetime import datetime

from domain.models import Comment, Location, RequestStatus, TravelRequest
from domain.request_actions import (
    add_comment,
    can_comment,
    can_edit,
    comment_on,
    delete_request,
    find_request,
    new_request,
    save_request,
    send_request,
)

AT = datetime(2024, 2, 10, 14, 30)


def _requests():
    return [TravelRequest(id="1"), TravelRequest(id="2")]


def test_new_request_is_blank_draft():
    req = new_request("99")
    assert req.id == "99"
    assert req.status is RequestStatus.DRAFT
    assert req.location == Location()
    assert req.dates.du is None and req.dates.au is None
    assert req.needs.carte_sim is False
    assert req.comments == ()


def test_save_request_appends_new():
    result = save_request(_requests(), TravelRequest(id="3"))
    assert [r.id for r in result] == ["1", "2", "3"]


def test_save_request_replaces_existing_in_place():
    updated = TravelRequest(id="1", location=Location(ville="Lyon"))
    result = save_request(_requests(), updated)
    assert [r.id for r in result] == ["1", "2"]
    assert result[0] is updated


def test_save_request_does_not_mutate_input():
    requests = _requests()
    save_request(requests, TravelRequest(id="3"))
    assert len(requests) == 2


def test_send_request_sets_status_sent():
    result = send_request(_requests(), TravelRequest(id="2"))
    assert find_request(result, "2").status is RequestStatus.SENT


def test_delete_request():
    assert [r.id for r in delete_request(_requests(), "1")] == ["2"]


def test_delete_unknown_request_is_noop():
    assert [r.id for r in delete_request(_requests(), "x")] == ["1", "2"]


def test_find_request_missing():
    assert find_request(_requests(), "x") is None


def test_add_comment_appends_in_order():
    req = add_comment(TravelRequest(id="1"), "Intermédiaire", "Hôtel réservé", AT, "c1")
    req = add_comment(req, "Vous", "Merci", AT, "c2")
    assert [c.id for c in req.comments] == ["c1", "c2"]
    assert req.comments[0] == Comment("c1", "Intermédiaire", "Hôtel réservé", AT)


def test_add_comment_default_id_from_timestamp():
    req = add_comment(TravelRequest(id="1"), "Vous", "Bonjour", AT)
    assert req.comments[0].id == str(int(AT.timestamp() * 1000))


def test_add_blank_comment_is_ignored():
    req = TravelRequest(id="1")
    assert add_comment(req, "Vous", "   ", AT) is req


def test_add_comment_keeps_original():
    req = TravelRequest(id="1")
    add_comment(req, "Vous", "Bonjour", AT)
    assert req.comments == ()


def test_comment_on_targets_one_request():
    requests = _requests()
    result = comment_on(requests, "2", "Vous", "Bonjour", AT, "c1")
    assert result[0] is requests[0]
    assert len(result[1].comments) == 1


def test_can_edit_only_drafts():
    assert can_edit(TravelRequest(id="1"))
    assert not can_edit(TravelRequest(id="1", status=RequestStatus.SENT))


def test_can_comment_only_after_sending():
    assert not can_comment(TravelRequest(id="1"))
    assert can_comment(TravelRequest(id="1", status=RequestStatus.SENT))
    assert can_comment(TravelRequest(id="1", status=RequestStatus.VALIDATED))
