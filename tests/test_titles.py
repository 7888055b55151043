import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from datetime import datetime

from simple_notes.core.titles import format_title, generate_note_id, unique_note_id


def test_afternoon():
    assert format_title(datetime(2026, 10, 19, 14, 30)) == "Oct 19, 2026, 02:30 PM"


def test_midnight_and_noon():
    assert format_title(datetime(2024, 1, 5, 0, 7)) == "Jan 5, 2024, 12:07 AM"
    assert format_title(datetime(2024, 12, 31, 12, 0)) == "Dec 31, 2024, 12:00 PM"


def test_generated_ids_differ():
    ids = {generate_note_id() for _ in range(200)}
    assert len(ids) == 200


def test_unique_note_id_skips_taken():
    seq = iter(["a", "b", "c"])
    assert unique_note_id({"a", "b"}, lambda: next(seq)) == "c"
