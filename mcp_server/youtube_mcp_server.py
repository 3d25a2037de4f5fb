"""
YouTube Transcript Plus MCP Server
==================================

Model Context Protocol (MCP) server exposing the four operations to AI agents
(Claude Desktop, Cursor, Windsurf, etc.)

Transport: stdio (secure, local-first)

Tools:
- get_transcript: Transcript of a video, optionally translated and summarized
- get_channel_info: Channel snippet, statistics and branding
- list_channel_videos: Latest uploads of a channel
- list_playlist_videos: Items of a playlist

Each call is a one-item batch that never raises: failures come back as
``{"error", "itemIndex", "details"}``.
"""

from typing import Any, Dict

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from yt_transcript_plus import Credentials, ItemInput, ItemOptions, process_batch

mcp = FastMCP("youtube-transcript-plus")


def _run(operation: str, identifier: str, **options) -> Dict[str, Any]:
    """Run one item with continue-on-failure and return its JSON payload."""
    try:
        item = ItemInput(operation=operation, identifier=identifier, options=ItemOptions(**options))
    except ValueError as e:
        return {"error": str(e), "itemIndex": 0, "details": ""}

    outcome = process_batch([item], Credentials.from_env(), continue_on_fail=True)[0]
    return outcome.to_json()


# --------- TOOL DECLARATIONS ---------

@mcp.tool()
def get_transcript(identifier: str, translate: bool = False, summarize: bool = False) -> Dict[str, Any]:
    """Fetch a video transcript (URL or 11-char ID); optionally translate and summarize it."""
    return _run("getTranscript", identifier, translate=translate, summarize=summarize)


@mcp.tool()
def get_channel_info(identifier: str, translate: bool = False) -> Dict[str, Any]:
    """Fetch channel snippet/statistics/branding for a channel URL or UC... ID."""
    return _run("getChannelInfo", identifier, translate=translate)


@mcp.tool()
def list_channel_videos(identifier: str, max_results: int = 10, translate: bool = False) -> Dict[str, Any]:
    """List the latest uploads of a channel (1-50 videos, first page only)."""
    return _run("listChannelVideos", identifier, translate=translate, max_results=max_results)


@mcp.tool()
def list_playlist_videos(identifier: str, max_results: int = 10, translate: bool = False) -> Dict[str, Any]:
    """List the videos of a playlist URL or PL... ID (1-50 videos, first page only)."""
    return _run("listPlaylistVideos", identifier, translate=translate, max_results=max_results)


# --------- SERVER STARTUP ---------

def main():
    """Run MCP server on stdio."""
    load_dotenv()
    mcp.run()


if __name__ == "__main__":
    main()
