"""
Command-line interface for the crawler.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from hopspider.core import crawl, CrawlStats
from hopspider.errors import CrawlError
from hopspider.fetcher import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT, DEFAULT_USER_AGENT

logger = logging.getLogger("hopspider")

EXAMPLE = "example:\n  hopspider 10 https://www.example.com"


def print_summary(visited: List[str], stats: CrawlStats) -> None:
    """Print crawl summary to stderr."""
    sys.stderr.write("=" * 50 + "\n")
    sys.stderr.write("CRAWL SUMMARY\n")
    sys.stderr.write("=" * 50 + "\n\n")

    sys.stderr.write(f"Pages visited:          {stats.pages_visited}\n")
    sys.stderr.write(f"Pages without links:    {stats.pages_without_links}\n")
    sys.stderr.write(f"Unreachable (skipped):  {stats.pages_unreachable}\n\n")

    for hop, url in enumerate(visited, start=1):
        sys.stderr.write(f"  {hop:>3}. {url}\n")

    if stats.unreachable:
        sys.stderr.write("\nUnreachable:\n")
        for url in stats.unreachable:
            sys.stderr.write(f"  {url}\n")

    sys.stderr.write("\n")


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Configure stderr logging at the level chosen on the command line."""
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the hopspider command."""
    parser = argparse.ArgumentParser(
        prog="hopspider",
        usage="%(prog)s <hops> <url>",
        description="Visit a number of sites, following one new link from each page.",
        epilog=EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("hops", type=int, help="number of sites to visit")
    parser.add_argument("url", nargs="?", help="url to start at")
    parser.add_argument(
        "--connect-timeout",
        type=float,
        default=DEFAULT_CONNECT_TIMEOUT,
        help=f"Connect timeout in seconds (default: {DEFAULT_CONNECT_TIMEOUT:g})",
    )
    parser.add_argument(
        "--read-timeout",
        type=float,
        default=DEFAULT_READ_TIMEOUT,
        help=f"Read timeout in seconds (default: {DEFAULT_READ_TIMEOUT:g})",
    )
    parser.add_argument("--user-agent", default=DEFAULT_USER_AGENT, help="User-Agent header")
    noise = parser.add_mutually_exclusive_group()
    noise.add_argument("--verbose", action="store_true", help="Show debug output and a summary")
    noise.add_argument("--quiet", action="store_true", help="Only show warnings and errors")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the crawler CLI."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        visited, stats = crawl(
            args.hops,
            args.url,
            connect_timeout=args.connect_timeout,
            read_timeout=args.read_timeout,
            user_agent=args.user_agent,
            logger=logger,
        )
    except CrawlError as e:
        logger.error("%s", e)
        return 1

    if args.verbose:
        print_summary(visited, stats)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
