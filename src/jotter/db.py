"""
Database module for Jotter.

The whole note collection is one JSON document on disk, loaded and saved
as a single snapshot.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

from jotter.config import get_db_path

logger = logging.getLogger(__name__)


class Note(BaseModel):
    """A single note."""

    id: int = Field(description="Unix timestamp in ms at creation")
    content: str = Field(min_length=1, description="Note text")
    tags: list[str] = Field(default_factory=list, description="Tag labels")


class NoteCollection(BaseModel):
    """Container for all notes, used for JSON serialization."""

    notes: list[Note] = Field(default_factory=list)


class Database:
    """JSON file wrapper for Jotter."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()
        self._ensure_db()

    def _ensure_db(self) -> None:
        """Ensure the document exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        if not self.db_path.exists():
            logger.debug("Creating empty note store at %s", self.db_path)
            self.save(NoteCollection())

    def load(self) -> NoteCollection:
        """Read the full collection. Decode errors propagate."""
        if not self.db_path.exists():
            self._ensure_db()

        with open(self.db_path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        collection = NoteCollection.model_validate(raw)
        logger.debug("Loaded %d notes from %s", len(collection.notes), self.db_path)
        return collection

    def save(self, collection: NoteCollection) -> None:
        """Replace the stored collection with this snapshot."""
        tmp_path = self.db_path.with_suffix(".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(collection.model_dump(), f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, self.db_path)

    def insert(self, note: Note) -> Note:
        """Append a note to the stored collection. Returns the note."""
        collection = self.load()
        collection.notes.append(note)
        self.save(collection)
        return note

    def get_stats(self) -> dict[str, int]:
        """Get collection statistics."""
        notes = self.load().notes
        return {
            "total_notes": len(notes),
            "total_tags": len({tag for note in notes for tag in note.tags}),
        }
