from __future__ import annotations

import json
from typing import Iterable

from simple_notes.core.models import Note
from simple_notes.errors import LoadDecodeError

_FIELDS = ("id", "title", "content")


def encode_notes(notes: Iterable[Note]) -> str:
    return json.dumps([n.to_dict() for n in notes], ensure_ascii=False)


def decode_notes(raw: str) -> list[Note]:
    """
    Parse a stored collection.

    Raises LoadDecodeError unless ``raw`` is a JSON array of objects with
    string ``id``/``title``/``content`` and no repeated id.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        raise LoadDecodeError(f"stored notes are not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise LoadDecodeError(f"stored notes must be a list, got {type(data).__name__}")

    notes: list[Note] = []
    seen: set[str] = set()
    for pos, item in enumerate(data):
        if not isinstance(item, dict):
            raise LoadDecodeError(f"note #{pos} is not an object")
        for name in _FIELDS:
            if not isinstance(item.get(name), str):
                raise LoadDecodeError(f"note #{pos}: field {name!r} missing or not a string")
        if item["id"] in seen:
            raise LoadDecodeError(f"note #{pos}: duplicate id {item['id']!r}")
        seen.add(item["id"])
        notes.append(Note(id=item["id"], title=item["title"], content=item["content"]))
    return notes
