"""CLI entry point for ghfetch."""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from ghfetch import __version__
from ghfetch.config import COLORS, DEFAULT_COLOR, Options, resolve_token
from ghfetch.errors import GhFetchError, UpstreamError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghfetch",
        description="Fetch GitHub user's profile, just like neofetch",
    )
    parser.add_argument("-u", "--user", default="", help="GitHub username")
    parser.add_argument(
        "-c",
        "--color",
        default=DEFAULT_COLOR,
        choices=COLORS,
        help=f"Highlight color {', '.join(COLORS)}",
    )
    parser.add_argument("--access-token", default=None, help="Your GitHub access token")
    parser.add_argument("--repo", default="", help="Repository URL")
    parser.add_argument(
        "--no-color-art",
        action="store_true",
        help="Render the avatar without colors",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def describe_error(err: GhFetchError) -> str:
    """One-line, user-facing description of a fatal error."""
    if isinstance(err, UpstreamError):
        if err.status_code == 401:
            return "Authentication failed (HTTP 401). Please check your GitHub token."
        if err.status_code == 404:
            return "Not found (HTTP 404). Check the username or the owner/repo in the URL."
    return str(err)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse flags, run one fetch and print the summary."""
    from dotenv import load_dotenv

    load_dotenv()  # Load .env file (e.g. GH_TOKEN)

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )

    from ghfetch.app import GhFetchApp

    try:
        options = Options(
            user=args.user,
            repo=args.repo,
            color=args.color,
            access_token=args.access_token,
            colored_art=not args.no_color_art,
        )
        token = resolve_token(options.access_token)
        options.require_target()
        asyncio.run(GhFetchApp(options, token).run())
    except GhFetchError as e:
        logger.error(describe_error(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
