"""
Surfacing module for Jotter.

Terminal formatting of notes. No business logic lives here.
"""

import os
import sys

from jotter.db import Note


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    BLUE = "\033[34m"
    WHITE = "\033[37m"

    BRIGHT_CYAN = "\033[96m"
    BRIGHT_MAGENTA = "\033[95m"

    @classmethod
    def enabled(cls) -> bool:
        """Check if colors should be enabled."""
        # Disable if NO_COLOR is set or not a tty
        if os.environ.get("NO_COLOR"):
            return False
        return sys.stdout.isatty()


def c(text: str, *codes: str) -> str:
    """Apply color codes to text if colors are enabled."""
    if not Colors.enabled():
        return text
    return "".join(codes) + text + Colors.RESET


def format_id(note_id: int | str) -> str:
    """Format note ID with hyphens for readability (4-3-3-3 pattern)."""
    clean = str(note_id).replace("-", "")
    # e.g. 1768427187928 -> 1768-427-187-928
    if len(clean) >= 13:
        return f"{clean[:4]}-{clean[4:7]}-{clean[7:10]}-{clean[10:]}"
    elif len(clean) >= 10:
        return f"{clean[:4]}-{clean[4:7]}-{clean[7:]}"
    elif len(clean) >= 7:
        return f"{clean[:4]}-{clean[4:]}"
    return clean


def format_tags(tags: list[str]) -> str:
    return ", ".join(c(f"#{tag}", Colors.BRIGHT_MAGENTA) for tag in tags)


def format_note(note: Note) -> str:
    """Format a single note as an ID/Content/Tags block."""
    lines = [
        c("-----", Colors.DIM),
        f"{c('ID:', Colors.DIM)} {c(str(note.id), Colors.BOLD, Colors.WHITE)} {c(f'({format_id(note.id)})', Colors.DIM)}",
        f"{c('Content:', Colors.DIM)} {c(note.content, Colors.BRIGHT_CYAN)}",
        f"{c('Tags:', Colors.DIM)} {format_tags(note.tags)}",
    ]
    return "\n".join(lines)


def format_notes(notes: list[Note], title: str = "NOTES") -> str:
    """Format notes with a header, one block per note."""
    if not notes:
        return c("No notes found.", Colors.DIM)

    lines = [c(f"━━━ {title} ({len(notes)}) ━━━", Colors.BOLD, Colors.BLUE)]
    lines.extend(format_note(note) for note in notes)
    return "\n".join(lines)
