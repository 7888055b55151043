from .models import EditorMode, EditorState, Note, NoteId
from .codec import decode_notes, encode_notes
from .titles import format_title, generate_note_id, unique_note_id

__all__ = ["EditorMode",
           "EditorState",
           "Note",
           "NoteId",
           "decode_notes",
           "encode_notes",
           "format_title",
           "generate_note_id",
           "unique_note_id"
           ]
