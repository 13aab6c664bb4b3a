"""
Command-line interface for mkvrelease.

Usage:
  mkvrelease upload film "The Movie" movie.mkv -l multi -s bluray
  mkvrelease upload show "The Show" *.mkv -l vostfr -s webdl
  mkvrelease backup show "The Show" https://uptobox.com/abcdef123456
  mkvrelease name film "The Movie" movie.mkv       # Dry run, print the name
  mkvrelease status                                # Tools and config
"""

from __future__ import annotations

import argparse
import functools
import logging
import os
import sys

from mkvrelease import mkvtoolnix
from mkvrelease._version import __version__
from mkvrelease.config import find_config_file, get_config, write_default_config
from mkvrelease.errors import ConfigError, ReleaseError
from mkvrelease.formatters import format_json_list, format_profile, to_dict
from mkvrelease.pipeline import (
    BatchReport,
    ReleaseRequest,
    backup_link,
    ensure_matroska,
    name_release,
    run_batch,
    upload_file,
)
from mkvrelease.remote import UptoboxClient
from mkvrelease.title import ContentKind
from mkvrelease.utils import missing_system_dependencies, print_dependency_status

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
IDENTIFY_TOOL = "mkvmerge"


def _add_release_arguments(parser: argparse.ArgumentParser, items: str, help_text: str) -> None:
    parser.add_argument("kind", choices=[k.value for k in ContentKind], help="Kind of release")
    parser.add_argument("title", help="Title of the film or show")
    parser.add_argument(items, nargs="+", help=help_text)
    parser.add_argument(
        "-l",
        "--languages",
        default="",
        help="Languages, space separated (multi, vostfr, vff)",
    )
    parser.add_argument(
        "-s",
        "--sources",
        default="",
        help="Sources, space separated (webdl, bluray, remux, ...)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mkvrelease",
        description="Name matroska files as releases and store them on Uptobox.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  upload    Name, retitle and upload local files
  backup    Download shared files, then name, retitle and upload them
  name      Print the release name of local files without uploading
  status    Show tool availability and config location

Examples:
  mkvrelease upload film "The Movie" movie.mkv -l multi -s bluray
  mkvrelease upload show "The Show" s01/*.mkv -l vostfr -s "web-dl"
  mkvrelease backup film "The Movie" https://uptobox.com/abcdef123456
  mkvrelease name show "The Show" The.Show.S01E01.mkv --json
        """,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    upload = subparsers.add_parser("upload", help="Upload local files")
    _add_release_arguments(upload, "paths", "Matroska file(s) to upload")

    backup = subparsers.add_parser("backup", help="Back up shared files")
    _add_release_arguments(backup, "links", "Uptobox link(s) to back up")

    name = subparsers.add_parser("name", help="Print release names (dry run)")
    _add_release_arguments(name, "paths", "Matroska file(s) to name")
    name.add_argument("--json", action="store_true", help="Print results as JSON")

    subparsers.add_parser("status", help="Show tool availability and config location")

    return parser


def setup_logging(verbose: bool) -> None:
    """Configure console logging."""
    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if verbose else logging.INFO,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for mkvrelease CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "status":
        return show_status()

    # A dry run only reads metadata
    required = [IDENTIFY_TOOL] if args.command == "name" else None
    missing = missing_system_dependencies(required)
    if missing:
        print(f"Error: {', '.join(missing)} is needed to use mkvrelease", file=sys.stderr)
        return 1

    request = ReleaseRequest(
        kind=ContentKind(args.kind),
        title=args.title,
        languages=args.languages,
        sources=args.sources,
    )

    if args.command == "name":
        return name_files(request, args.paths, as_json=args.json)

    try:
        if find_config_file() is None:
            created = write_default_config()
            print(f"Created default config: {created}")
        config = get_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.has_api_key:
        print(
            "Error: no Uptobox API token configured. "
            "Set api_key in the config file or MKVRELEASE_API_KEY.",
            file=sys.stderr,
        )
        return 1

    with UptoboxClient(config.api_key or "", timeout=config.timeout_seconds) as store:
        if args.command == "upload":
            action = functools.partial(
                upload_file, store, request=request, destination=config.destination_path
            )
            report = run_batch(args.paths, action)
        else:
            action = functools.partial(
                backup_link,
                store,
                request=request,
                local_dir=config.local_path,
                destination=config.destination_path,
            )
            report = run_batch(args.links, action)

    return print_report(report)


def name_files(request: ReleaseRequest, paths: list[str], as_json: bool = False) -> int:
    """Print the release name of each file without touching it.

    Returns:
        Exit code (0 for success, 1 if any file failed)
    """
    entries = []
    errors = 0

    for path in paths:
        path = path.strip()
        try:
            file_name = os.path.basename(path)
            ensure_matroska(file_name)
            name, profile = name_release(path, file_name, request)
        except ReleaseError as e:
            print(f"Error naming {path}: {e}", file=sys.stderr)
            errors += 1
            continue

        if as_json:
            entries.append(to_dict(path, name, profile))
        else:
            print(format_profile(path, name, profile))
            print()

    if as_json:
        print(format_json_list(entries))

    return 1 if errors > 0 else 0


def print_report(report: BatchReport) -> int:
    """Print a batch summary and return the exit code."""
    for result in report.results:
        print(f"Released: {result.name} ({result.code})")
    for item, error in report.failures.items():
        print(f"Error releasing {item}: {error}", file=sys.stderr)

    total = len(report.results) + len(report.failures)
    print(f"\n{len(report.results)}/{total} file(s) released")
    return 0 if report.ok else 1


def show_status() -> int:
    """Print tool availability and configuration location."""
    print("mkvrelease status:")
    print("=" * 50)
    print()
    print_dependency_status()

    print()
    print("Configuration:")
    print("-" * 50)
    config_path = find_config_file()
    print(f"  File:         {config_path or 'not found'}")
    try:
        config = get_config()
    except ConfigError as e:
        print(f"  Error:        {e}")
        return 1
    print(f"  API token:    {'set' if config.has_api_key else 'missing'}")
    print(f"  Local path:   {config.local_path}")
    print(f"  Destination:  {config.destination_path}")
    return 0 if mkvtoolnix.is_available() else 1


if __name__ == "__main__":
    sys.exit(main())
