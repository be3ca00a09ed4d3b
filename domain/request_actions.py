"""Request list reducers — pure functions, zero external dependencies.

Only stdlib and domain.models imports allowed.

Collections are taken as any iterable and returned as new lists; requests
are immutable, so callers keep their previous state untouched.
"""

from __future__ import annotations

import dataclasses
from datetime import datetime

from domain.models import Comment, RequestStatus, TravelRequest


def new_request(request_id):
    """Blank draft shown when the form opens without a request."""
    return TravelRequest(id=request_id)


def save_request(requests, request):
    """Replace the request with the same id, or append it."""
    result = list(requests)
    for i, existing in enumerate(result):
        if existing.id == request.id:
            result[i] = request
            return result
    result.append(request)
    return result


def send_request(requests, request):
    return save_request(requests, dataclasses.replace(request, status=RequestStatus.SENT))


def delete_request(requests, request_id):
    return [r for r in requests if r.id != request_id]


def find_request(requests, request_id):
    for r in requests:
        if r.id == request_id:
            return r
    return None


def add_comment(request, author, text, at: datetime, comment_id: str | None = None):
    """Append a comment; blank text leaves the request unchanged.

    The comment id defaults to the creation timestamp in milliseconds.
    """
    if not text or not text.strip():
        return request
    if comment_id is None:
        comment_id = str(int(at.timestamp() * 1000))
    comment = Comment(id=comment_id, author=author, text=text, date=at)
    return dataclasses.replace(request, comments=request.comments + (comment,))


def comment_on(requests, request_id, author, text, at, comment_id=None):
    """Apply ``add_comment`` to the request *request_id* inside a list."""
    return [
        add_comment(r, author, text, at, comment_id) if r.id == request_id else r
        for r in requests
    ]


def can_edit(request):
    """Only drafts can be edited or deleted."""
    return request.status is RequestStatus.DRAFT


def can_comment(request):
    return request.status is not RequestStatus.DRAFT
