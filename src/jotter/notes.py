"""
Note store for Jotter.

Create, read, search and delete over the persisted note collection. Every
operation is an independent load-then-save through the injected Database;
there is no locking, so the last writer wins.
"""

import logging

from jotter.db import Database, Note, NoteCollection
from jotter.ingress import next_id

logger = logging.getLogger(__name__)

TAG_PREFIX = "#"


class ValidationError(ValueError):
    """Raised when a note cannot be created from the given input."""


class NoteStore:
    """Note operations over a single JSON snapshot."""

    def __init__(self, db: Database | None = None):
        self.db = db or Database()

    def create(self, content: str | None, tags: list[str] | None = None) -> Note:
        """
        Create and persist a new note.

        Raises ValidationError if content is empty or missing.
        """
        if not content:
            raise ValidationError("Note content cannot be empty")

        collection = self.db.load()
        note = Note(
            id=next_id(n.id for n in collection.notes),
            content=content,
            tags=list(tags or []),
        )
        collection.notes.append(note)
        self.db.save(collection)

        logger.info("Created note %s with %d tags", note.id, len(note.tags))
        return note

    def list_all(self) -> list[Note]:
        """Return every stored note."""
        return self.db.load().notes

    def search(self, filter: str) -> list[Note]:
        """
        Find notes matching filter.

        "#word" matches notes tagged exactly "word" or whose content contains
        "word" (case-sensitive). Anything else is a case-insensitive content
        substring match.
        """
        notes = self.list_all()

        if filter.startswith(TAG_PREFIX):
            tag = filter[len(TAG_PREFIX):]
            return [n for n in notes if tag in n.tags or tag in n.content]

        needle = filter.lower()
        return [n for n in notes if needle in n.content.lower()]

    def search_by_tag(self, tag: str) -> list[Note]:
        """Return notes carrying exactly this tag (case-sensitive)."""
        return [n for n in self.list_all() if tag in n.tags]

    def delete_by_id(self, note_id: int) -> int | None:
        """
        Remove a note by ID.

        Returns the ID if a note was removed, None if nothing matched.
        """
        collection = self.db.load()
        remaining = [n for n in collection.notes if n.id != note_id]
        if len(remaining) == len(collection.notes):
            logger.debug("No note with id %s", note_id)
            return None

        self.db.save(NoteCollection(notes=remaining))
        logger.info("Removed note %s", note_id)
        return note_id

    def delete_all(self) -> None:
        """Remove every note."""
        self.db.save(NoteCollection())
        logger.info("Removed all notes")
