"""Print the components of raw URLs and compare them with yarl."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator, Optional

from yarl import URL

from .constants import DEFAULT_FALLBACK_SCHEME
from .errors import RawURLError
from .logs import logger
from .options import ParseOptions
from .parser import decompose
from .url import RawURL


def read_urls(path: Path) -> Iterator[str]:
    """Read URLs from the given file, one per line. Blank lines and `#` comments are skipped."""
    with path.open(encoding="utf-8", errors="surrogateescape") as fp:
        for line in fp:
            line = line.rstrip("\r\n")
            if line.strip() and not line.startswith("#"):
                yield line


def print_url(url: RawURL):
    print(f"Full URL:    {url.full_url}")
    print(f"Scheme:      {url.scheme}")
    if url.is_opaque:
        print(f"Opaque:      {url.opaque}")
        return

    if url.userinfo is not None:
        print(f"Username:    {url.username}")
        if url.userinfo.password_set:
            print(f"Password:    {url.password}")

    print(f"Host:        {url.host}")
    print(f"Hostname:    {url.hostname}")
    print(f"Port:        {url.port}")
    print(f"Path:        {url.path}")
    print(f"Query:       {url.query}")
    print(f"Fragment:    {url.fragment}")
    print(f"Request URI: {url.request_uri}")


def print_comparison(raw: str, url: RawURL):
    """Show how a normalizing parser sees the same string."""
    try:
        std = URL(raw)
    except ValueError as exc:
        print(f"yarl error:  {exc}")
        return

    print(f"yarl URL:    {std}")
    print(f"yarl path:   {std.raw_path}")
    if str(std) != url.full_url:
        print("!! yarl changed the URL")


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="rawurl",
        description="Split raw URLs into components without normalizing them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rawurl 'https://example.com/x/..;/admin?a=1#top'
  rawurl --compare 'https://example.com/path1%2f..%2f/path2'
  rawurl -f payloads.txt --fallback-scheme http
        """,
    )
    parser.add_argument("urls", nargs="*", help="URLs to parse")
    parser.add_argument("--file", "-f", type=Path, help="Read URLs from a file (one per line)")
    parser.add_argument(
        "--fallback-scheme",
        default=DEFAULT_FALLBACK_SCHEME,
        help=f"Scheme for URLs without one (default: {DEFAULT_FALLBACK_SCHEME})",
    )
    parser.add_argument("--strict", action="store_true", help="Fail on URLs without a scheme")
    parser.add_argument("--compare", action="store_true", help="Compare with yarl")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    urls = list(args.urls)
    if args.file:
        urls.extend(read_urls(args.file))

    if not urls:
        parser.error("no URLs given")

    options = ParseOptions(
        fallback_scheme=args.fallback_scheme,
        allow_missing_scheme=not args.strict,
    )
    logger.debug("Parse %d URLs with %r", len(urls), options)

    status = 0
    for raw in urls:
        print(f"\nURL: {raw}")
        print("-" * 40)
        try:
            url = decompose(raw, options)
        except RawURLError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            status = 1
            continue

        print_url(url)
        if args.compare:
            print_comparison(raw, url)

    return status


if __name__ == "__main__":
    sys.exit(main())
