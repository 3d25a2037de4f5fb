"""MCP stdio server exposing the YouTube Transcript Plus operations."""
