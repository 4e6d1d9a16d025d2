"""
Shared fixtures for the jotter tests.
"""

import pathlib

import pytest

from jotter.db import Database, Note, NoteCollection
from jotter.notes import NoteStore


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: pathlib.Path, monkeypatch):
    """Point every path lookup at a throwaway directory."""
    monkeypatch.setenv("JOTTER_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("JOTTER_LOG_LEVEL", raising=False)
    return tmp_path / "home"


@pytest.fixture
def db(tmp_path: pathlib.Path) -> Database:
    return Database(tmp_path / "store" / "notes.json")


@pytest.fixture
def store(db: Database) -> NoteStore:
    return NoteStore(db)


@pytest.fixture
def seeded(db: Database) -> list[Note]:
    """Two notes mirroring a typical small collection."""
    notes = [
        Note(id=1, content="test note #1", tags=["tag1", "tag2"]),
        Note(id=2, content="test note #2", tags=["tag3", "tag4"]),
    ]
    db.save(NoteCollection(notes=notes))
    return notes
