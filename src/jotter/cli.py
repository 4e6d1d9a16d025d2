"""
CLI for Jotter.

Minimal CLI using stdlib for fast startup.
Subcommands are imported lazily to avoid startup overhead.

Usage:
    jotter new "buy milk" --tags=home,errands
    jotter find milk
    jotter --help
"""

import sys


def print_help() -> None:
    """Print help message."""
    print("""jotter - personal notes from the terminal

Usage:
    jotter <command> [args]

Commands:
    jotter new <content> [--tags=a,b]   Create a note (-t a,b also works)
    jotter all                          List all notes
    jotter find <filter>                Search content; "#word" matches tags too
    jotter tag <tag>                    List notes with exactly this tag
    jotter remove <id>                  Remove a note by id
    jotter clean                        Remove all notes
    jotter web [port]                   Serve notes as a web page (default 5000)
    jotter stats                        Show note statistics

Options:
    jotter --help, -h                   Show this help
    jotter --version, -v                Show version

Examples:
    jotter new "Email Sarah about the venue" --tags=work,todo
    jotter find venue
    jotter find "#work"
    jotter remove 1768427187928""")


def print_version() -> None:
    """Print version."""
    from jotter import __version__
    print(f"jotter {__version__}")


def parse_tags(value: str) -> list[str]:
    """Split a comma-separated tag list, dropping blanks."""
    return [tag.strip() for tag in value.split(",") if tag.strip()]


def cmd_new(args: list[str]) -> int:
    """Create a note."""
    from jotter.notes import NoteStore, ValidationError
    from jotter.surfacing import format_note

    tags: list[str] = []
    words: list[str] = []

    # Parse arguments
    i = 0
    while i < len(args):
        arg = args[i]
        if arg.startswith("--tags="):
            tags = parse_tags(arg.split("=", 1)[1])
            i += 1
        elif arg in ("--tags", "-t") and i + 1 < len(args):
            tags = parse_tags(args[i + 1])
            i += 2
        else:
            words.append(arg)
            i += 1

    content = " ".join(words)

    try:
        note = NoteStore().create(content, tags)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Note created")
    print(format_note(note))
    return 0


def cmd_all() -> int:
    """List all notes."""
    from jotter.notes import NoteStore
    from jotter.surfacing import format_notes

    print(format_notes(NoteStore().list_all()))
    return 0


def cmd_find(args: list[str]) -> int:
    """Search notes by content, or by tag with a leading #."""
    from jotter.notes import NoteStore
    from jotter.surfacing import format_notes

    if not args:
        print("Usage: jotter find <filter>", file=sys.stderr)
        return 1

    query = " ".join(args)
    notes = NoteStore().search(query)
    print(format_notes(notes, title=f"SEARCH: {query}"))
    return 0


def cmd_tag(args: list[str]) -> int:
    """List notes carrying a tag."""
    from jotter.notes import NoteStore
    from jotter.surfacing import format_notes

    if not args:
        print("Usage: jotter tag <tag>", file=sys.stderr)
        return 1

    tag = args[0]
    notes = NoteStore().search_by_tag(tag)
    print(format_notes(notes, title=f"TAG: #{tag}"))
    return 0


def cmd_remove(args: list[str]) -> int:
    """Remove a note by id."""
    from jotter.notes import NoteStore

    if not args:
        print("Usage: jotter remove <id>", file=sys.stderr)
        return 1

    try:
        note_id = int(args[0].replace("-", ""))
    except ValueError:
        print(f"Error: Invalid id: {args[0]}", file=sys.stderr)
        return 1

    removed = NoteStore().delete_by_id(note_id)
    if removed is None:
        print(f"Not found: {note_id}", file=sys.stderr)
        return 1

    print(f"Note with id {removed} removed")
    return 0


def cmd_clean() -> int:
    """Remove all notes."""
    from jotter.notes import NoteStore

    NoteStore().delete_all()
    print("All notes removed")
    return 0


def cmd_web(args: list[str]) -> int:
    """Serve the notes page."""
    from jotter.config import load_config
    from jotter.web import start

    web_config = load_config().get("web", {})
    port = web_config.get("port", 5000)

    if args:
        try:
            port = int(args[0])
        except ValueError:
            print(f"Error: Invalid port: {args[0]}", file=sys.stderr)
            return 1

    start(port=port, open_browser=web_config.get("open_browser", True))
    return 0


def cmd_stats() -> int:
    """Show note statistics."""
    from jotter.db import Database

    stats = Database().get_stats()

    print("Jotter Statistics")
    print("-" * 30)
    print(f"Total notes: {stats['total_notes']}")
    print(f"Distinct tags: {stats['total_tags']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Returns the process exit code.
    """
    args = sys.argv[1:] if argv is None else argv

    if not args:
        print_help()
        return 0

    first_arg = args[0]

    if first_arg in ("--help", "-h", "help"):
        print_help()
        return 0

    if first_arg in ("--version", "-v", "version"):
        print_version()
        return 0

    from jotter.config import setup_logging
    setup_logging()

    # Subcommands (lazy import to keep startup fast)
    if first_arg == "new":
        return cmd_new(args[1:])

    if first_arg == "all":
        return cmd_all()

    if first_arg == "find":
        return cmd_find(args[1:])

    if first_arg == "tag":
        return cmd_tag(args[1:])

    if first_arg == "remove":
        return cmd_remove(args[1:])

    if first_arg == "clean":
        return cmd_clean()

    if first_arg == "web":
        return cmd_web(args[1:])

    if first_arg == "stats":
        return cmd_stats()

    print(f"Error: Unknown command: {first_arg}", file=sys.stderr)
    print("Run 'jotter --help' for usage.", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
