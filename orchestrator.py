"""
YouTube Transcript Plus - Main CLI
==================================

Batch runner: every identifier on the command line (or in --input-file) is one
item, all items run the same operation with the same options.

Usage:
    python orchestrator.py getTranscript "https://youtu.be/dQw4w9WgXcQ" --translate --summarize

Flow:
    1. Load credentials from environment / .env (once per batch)
    2. Build one item per identifier
    3. Process items in order (classify -> operation -> translate/summarize)
    4. Write {json, pairedItem} records as a JSON array
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from tqdm import tqdm

from yt_transcript_plus import OPERATIONS, Credentials, ItemInput, ItemOptions, process_batch


def _read_identifiers(args) -> list:
    identifiers = list(args.identifiers)
    if args.input_file:
        lines = Path(args.input_file).read_text(encoding="utf-8").splitlines()
        identifiers.extend(line.strip() for line in lines if line.strip() and not line.strip().startswith("#"))
    return identifiers


def _page_size(value: str) -> int:
    n = int(value)
    if not 1 <= n <= 50:
        raise argparse.ArgumentTypeError("must be between 1 and 50")
    return n


def build_parser():
    parser = argparse.ArgumentParser(
        description="YouTube transcripts, channel info and video lists (with translation + summaries)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Transcript translated to Arabic and summarized
  python orchestrator.py getTranscript dQw4w9WgXcQ --translate --summarize

  # Channel metadata
  python orchestrator.py getChannelInfo "https://www.youtube.com/channel/UC..."

  # Latest 25 uploads of two channels, keep going if one fails
  python orchestrator.py listChannelVideos UC... UC... --max-results 25 --continue-on-fail

  # Playlist items from a file of URLs
  python orchestrator.py listPlaylistVideos --input-file playlists.txt --output out.json
        """
    )

    parser.add_argument(
        "operation",
        choices=sorted(OPERATIONS),
        help="Operation to run for every item"
    )
    parser.add_argument(
        "identifiers",
        nargs="*",
        help="YouTube URLs or IDs (one item each)"
    )
    parser.add_argument(
        "--input-file",
        default=None,
        help="File with one identifier per line (# comments allowed)"
    )
    parser.add_argument(
        "--translate",
        action="store_true",
        help="Translate text to the target language (default: ar)"
    )
    parser.add_argument(
        "--summarize",
        action="store_true",
        help="Summarize transcripts with the configured LLM"
    )
    parser.add_argument(
        "--max-results",
        type=_page_size,
        default=10,
        help="Videos per list operation, 1-50 (default: 10)"
    )
    parser.add_argument(
        "--continue-on-fail",
        action="store_true",
        help="Emit an error record for failing items instead of aborting"
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Write JSON here instead of stdout"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Verbose output"
    )
    return parser


def main(argv=None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    identifiers = _read_identifiers(args)
    if not identifiers:
        parser.error("no identifiers given (pass them as arguments or via --input-file)")

    creds = Credentials.from_env()
    options = ItemOptions(
        translate=args.translate,
        summarize=args.summarize,
        max_results=args.max_results,
    )
    items = [ItemInput(operation=args.operation, identifier=i, options=options) for i in identifiers]

    print(f"🎥 {args.operation}: {len(items)} item(s)", file=sys.stderr)
    try:
        outcomes = process_batch(
            tqdm(items, desc="Processing", unit="item", file=sys.stderr, disable=len(items) < 2),
            creds,
            continue_on_fail=args.continue_on_fail,
        )
    except Exception as e:
        print(f"❌ Batch aborted: {e}", file=sys.stderr)
        return 1

    records = [o.to_record() for o in outcomes]
    text = json.dumps(records, ensure_ascii=False, indent=2)

    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        print(f"✅ Wrote {len(records)} record(s) to {args.output}", file=sys.stderr)
    else:
        print(text)

    failed = sum(1 for r in records if "error" in r["json"])
    if failed:
        print(f"⚠️  {failed} item(s) failed", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
