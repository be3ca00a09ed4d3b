"""Copy-on-write updates of nested records addressed by dot paths.

Only stdlib imports allowed.

A record is either a dataclass instance or a mapping. Updating
``"arrival.precise_time"`` re-creates the root and ``arrival`` and keeps every
other branch by identity, so observers can compare untouched subtrees with
``is``.

Copied mappings keep their type: mutable ones (dict, OrderedDict,
defaultdict) are shallow-copied, read-only ones such as MappingProxyType are
rebuilt from a dict, and a read-only type that cannot be built from a dict
comes back as a plain dict.
"""

from __future__ import annotations

import copy
import dataclasses
import sys
from collections.abc import Mapping, MutableMapping
from typing import Any

from domain.models import TravelRequest


class InvalidPathError(ValueError):
    """Raised when a path does not address a field of the record."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Chemin invalide {path!r}: {reason}")
        self.path = path
        self.reason = reason


def _split(path):
    if not isinstance(path, str) or not path:
        raise InvalidPathError(str(path), "chemin vide")
    segments = path.split(".")
    if any(not s for s in segments):
        raise InvalidPathError(path, "segment vide")
    return segments


def _is_record(obj):
    return isinstance(obj, Mapping) or (
        dataclasses.is_dataclass(obj) and not isinstance(obj, type)
    )


def _child(record, segment, path):
    if not _is_record(record):
        raise InvalidPathError(path, f"{segment!r} n'est pas dans un enregistrement")
    if isinstance(record, Mapping):
        if segment not in record:
            raise InvalidPathError(path, f"champ {segment!r} inconnu")
        return record[segment]
    names = {f.name for f in dataclasses.fields(record)}
    if segment not in names:
        raise InvalidPathError(path, f"champ {segment!r} inconnu")
    return getattr(record, segment)


def _replace(record, segment, value):
    if isinstance(record, MutableMapping):
        new = copy.copy(record)
        new[segment] = value
        return new
    if isinstance(record, Mapping):
        merged = dict(record)
        merged[segment] = value
        try:
            return type(record)(merged)
        except TypeError:
            return merged
    return dataclasses.replace(record, **{segment: value})


def get_path(root: Any, path: str) -> Any:
    """Return the value addressed by *path* in *root*."""
    current = root
    for segment in _split(path):
        current = _child(current, segment, path)
    return current


def update(root: Any, path: str, value: Any) -> Any:
    """Return a copy of *root* with the leaf at *path* replaced by *value*.

    Every record on the path is shallow-copied; everything else is shared
    with *root*. *root* itself is never mutated.

    Raises:
        InvalidPathError: empty path, empty segment, unknown field, or an
            intermediate segment that is not a record.
    """
    segments = _split(path)

    chain = [root]
    for segment in segments:
        chain.append(_child(chain[-1], segment, path))

    new_value = value
    for record, segment in zip(reversed(chain[:-1]), reversed(segments)):
        new_value = _replace(record, segment, new_value)
    return new_value


def leaf_paths(record_type: type, prefix: str = "") -> list[str]:
    """List every leaf path of a dataclass schema, in field order."""
    module = sys.modules[record_type.__module__]
    paths = []
    for f in dataclasses.fields(record_type):
        path = f"{prefix}{f.name}"
        field_type = f.type
        # Postponed annotations: only bare class names can be nested records.
        if isinstance(field_type, str):
            field_type = getattr(module, field_type, None)
        if isinstance(field_type, type) and dataclasses.is_dataclass(field_type):
            paths.extend(leaf_paths(field_type, prefix=f"{path}."))
        else:
            paths.append(path)
    return paths


REQUEST_PATHS = frozenset(leaf_paths(TravelRequest))


def update_request(request: TravelRequest, path: str, value: Any) -> TravelRequest:
    """Update one form field of a request.

    Only leaf paths of the ``TravelRequest`` schema are accepted, so a typo
    such as ``"location"`` (a whole section) or ``"needs.wifi"`` is rejected
    before anything is copied.
    """
    if path not in REQUEST_PATHS:
        raise InvalidPathError(str(path), "pas un champ du formulaire")
    return update(request, path, value)
