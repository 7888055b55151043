from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

NoteId = str


@dataclass(frozen=True)
class Note:
    id: NoteId
    title: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "title": self.title, "content": self.content}


class EditorMode(str, Enum):
    COMPOSING = "composing"
    EDITING = "editing"


@dataclass(frozen=True)
class EditorState:
    """Transient editor slot: the text in the input and the note it edits, if any."""

    draft: str = ""
    editing_target: Optional[NoteId] = None

    @property
    def mode(self) -> EditorMode:
        return EditorMode.COMPOSING if self.editing_target is None else EditorMode.EDITING

    @property
    def has_text(self) -> bool:
        return bool(self.draft.strip())
