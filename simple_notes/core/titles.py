from __future__ import annotations

import uuid
from datetime import datetime
from typing import Callable, Container


def format_title(moment: datetime) -> str:
    """
    Human-readable note title, e.g. ``Oct 19, 2026, 02:30 PM``.

    Month names come from a fixed table so the result does not depend on
    the process locale.
    """
    month = _MONTHS[moment.month - 1]
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{month} {moment.day}, {moment.year}, {hour:02d}:{moment.minute:02d} {meridiem}"


_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def generate_note_id() -> str:
    return uuid.uuid4().hex


def unique_note_id(taken: Container[str], factory: Callable[[], str] = generate_note_id) -> str:
    """Draw ids from ``factory`` until one is not in ``taken``."""
    while True:
        note_id = factory()
        if note_id not in taken:
            return note_id
