"""
Web view for Jotter.

Serves a single page listing every note. The page is a static HTML template
with {{ placeholder }} substitution; there is no templating engine.
"""

import html
import logging
import pathlib
import re
import webbrowser
from typing import Any

from flask import Flask, request

from jotter.db import Note
from jotter.notes import NoteStore

logger = logging.getLogger(__name__)

TEMPLATES = pathlib.Path(__file__).parent / "templates"
HTML_PATH = TEMPLATES / "template.html"

PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def interpolate(template: str, data: dict[str, Any]) -> str:
    """Replace {{ name }} with data["name"]. Missing or empty values become ""."""
    return PLACEHOLDER.sub(lambda m: str(data.get(m.group(1)) or ""), template)


def format_notes_html(notes: list[Note]) -> str:
    """Render notes as <div> blocks: content heading plus a row of #tags."""
    blocks = []
    for note in notes:
        tags = " ".join(f"<span>#{html.escape(tag)}</span>" for tag in note.tags)
        blocks.append(f"""
      <div>
        <h2>{html.escape(note.content)}</h2>
        <div class="tags">
            {tags}
        </div>
      </div>
      """)
    return "".join(blocks)


def render_page(notes: list[Note]) -> str:
    template = HTML_PATH.read_text(encoding="utf-8")
    return interpolate(template, {"notes": format_notes_html(notes)})


def create_app(store: NoteStore | None = None) -> Flask:
    """Build the Flask app. Notes are re-read on every request."""
    store = store or NoteStore()
    app = Flask(__name__)

    @app.route("/")
    def index():
        return render_page(store.list_all())

    @app.route("/api/notes")
    def get_notes():
        query = request.args.get("filter", "")
        notes = store.search(query) if query else store.list_all()
        return {"notes": [note.model_dump() for note in notes]}

    return app


def start(store: NoteStore | None = None, port: int = 5000, open_browser: bool = True) -> None:
    """Run the web view on localhost:port until interrupted."""
    app = create_app(store)
    url = f"http://localhost:{port}/"

    logger.info("Serving notes at %s", url)
    print(f"Server running at {url}")

    if open_browser:
        webbrowser.open(url)

    app.run(host="localhost", port=port)
