"""
Unit tests for the JSON document backend.
"""

import json
import pathlib

import pydantic
import pytest

from jotter.db import Database, Note, NoteCollection


def test_creates_empty_document(tmp_path: pathlib.Path):
    path = tmp_path / "nested" / "notes.json"
    db = Database(path)

    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == {"notes": []}
    assert db.load().notes == []


def test_default_path_uses_jotter_home(isolated_home: pathlib.Path):
    db = Database()
    assert db.db_path == isolated_home / "notes.json"
    assert db.db_path.exists()


def test_save_then_load(db: Database):
    collection = NoteCollection(notes=[Note(id=7, content="hello", tags=["x"])])
    db.save(collection)

    assert db.load() == collection


def test_document_layout(db: Database):
    db.save(NoteCollection(notes=[Note(id=7, content="hello", tags=["x"])]))

    raw = json.loads(db.db_path.read_text(encoding="utf-8"))
    assert raw == {"notes": [{"id": 7, "content": "hello", "tags": ["x"]}]}


def test_save_leaves_no_temp_file(db: Database):
    db.save(NoteCollection(notes=[Note(id=1, content="a")]))
    assert not db.db_path.with_suffix(".tmp").exists()


def test_insert_appends(db: Database):
    db.insert(Note(id=1, content="a"))
    db.insert(Note(id=2, content="b", tags=["t"]))

    assert [n.id for n in db.load().notes] == [1, 2]


def test_load_recreates_missing_file(db: Database):
    db.db_path.unlink()
    assert db.load().notes == []


def test_corrupt_document_raises(db: Database):
    db.db_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        db.load()


def test_invalid_document_raises(db: Database):
    db.db_path.write_text(json.dumps({"notes": [{"id": 1, "content": ""}]}), encoding="utf-8")
    with pytest.raises(pydantic.ValidationError):
        db.load()


def test_get_stats(db: Database):
    db.save(NoteCollection(notes=[
        Note(id=1, content="a", tags=["x", "y"]),
        Note(id=2, content="b", tags=["y"]),
    ]))

    assert db.get_stats() == {"total_notes": 2, "total_tags": 2}
