"""
MCP Server for Jotter.

Exposes jotter notes as tools for MCP clients.
"""

import asyncio

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from jotter.notes import NoteStore, ValidationError
from jotter.surfacing import format_note, format_notes

# Create MCP server
server = Server("jotter")


def text(message: str) -> list[TextContent]:
    return [TextContent(type="text", text=message)]


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="jotter_new",
            description="Create a note with optional tags.",
            inputSchema={
                "type": "object",
                "properties": {
                    "content": {
                        "type": "string",
                        "description": "The note text",
                    },
                    "tags": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Tags to attach (optional)",
                    },
                },
                "required": ["content"],
            },
        ),
        Tool(
            name="jotter_all",
            description="List every note.",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
        Tool(
            name="jotter_find",
            description=(
                "Search notes. Plain text matches content case-insensitively; "
                "'#word' matches notes tagged 'word' or containing 'word'."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "filter": {
                        "type": "string",
                        "description": "Search filter",
                    },
                },
                "required": ["filter"],
            },
        ),
        Tool(
            name="jotter_tag",
            description="List notes carrying exactly this tag.",
            inputSchema={
                "type": "object",
                "properties": {
                    "tag": {
                        "type": "string",
                        "description": "Tag name without the leading #",
                    },
                },
                "required": ["tag"],
            },
        ),
        Tool(
            name="jotter_remove",
            description="Remove a note by id.",
            inputSchema={
                "type": "object",
                "properties": {
                    "id": {
                        "type": "integer",
                        "description": "The id of the note to remove",
                    },
                },
                "required": ["id"],
            },
        ),
        Tool(
            name="jotter_clean",
            description="Remove all notes.",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "jotter_new":
            return await tool_new(arguments)
        elif name == "jotter_all":
            return await tool_all(arguments)
        elif name == "jotter_find":
            return await tool_find(arguments)
        elif name == "jotter_tag":
            return await tool_tag(arguments)
        elif name == "jotter_remove":
            return await tool_remove(arguments)
        elif name == "jotter_clean":
            return await tool_clean(arguments)
        else:
            return text(f"Unknown tool: {name}")
    except Exception as e:
        return text(f"Error: {e}")


async def tool_new(args: dict, store: NoteStore | None = None) -> list[TextContent]:
    """Create a note."""
    store = store or NoteStore()
    try:
        note = store.create((args.get("content") or "").strip(), args.get("tags") or [])
    except ValidationError as e:
        return text(f"Error: {e}")

    return text(f"Note created\n{format_note(note)}")


async def tool_all(args: dict, store: NoteStore | None = None) -> list[TextContent]:
    """List all notes."""
    store = store or NoteStore()
    return text(format_notes(store.list_all()))


async def tool_find(args: dict, store: NoteStore | None = None) -> list[TextContent]:
    """Search notes."""
    query = args.get("filter", "")
    if not query:
        return text("Error: Empty filter")

    store = store or NoteStore()
    return text(format_notes(store.search(query), title=f"SEARCH: {query}"))


async def tool_tag(args: dict, store: NoteStore | None = None) -> list[TextContent]:
    """List notes by tag."""
    tag = args.get("tag", "").strip()
    if not tag:
        return text("Error: No tag provided")

    store = store or NoteStore()
    return text(format_notes(store.search_by_tag(tag), title=f"TAG: #{tag}"))


async def tool_remove(args: dict, store: NoteStore | None = None) -> list[TextContent]:
    """Remove a note."""
    note_id = args.get("id")
    if note_id is None:
        return text("Error: No id provided")

    store = store or NoteStore()
    removed = store.delete_by_id(int(note_id))

    if removed is None:
        return text(f"Not found: {note_id}")
    return text(f"Note with id {removed} removed")


async def tool_clean(args: dict, store: NoteStore | None = None) -> list[TextContent]:
    """Remove all notes."""
    store = store or NoteStore()
    store.delete_all()
    return text("All notes removed")


async def main():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
