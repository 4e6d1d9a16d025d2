"""MCP server exposing Jotter notes as tools."""
