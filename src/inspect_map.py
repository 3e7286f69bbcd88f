"""
Standalone CLI for checking a world map file without running actions.

Usage:
    python -m src.inspect_map worlds/start.map
    python -m src.inspect_map worlds/start.map --json
"""

import argparse
import sys

from .mapfile import inspect_map


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Check a block world map file and render its grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src.inspect_map worlds/start.map
  python -m src.inspect_map worlds/start.map --json > report.json
        """
    )
    parser.add_argument(
        "map",
        help="Path to the world map file"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full report as JSON"
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the map file (default: utf-8)"
    )

    args = parser.parse_args(argv)

    report = inspect_map(args.map, encoding=args.encoding)

    if args.json:
        print(report.model_dump_json(indent=2))
        return 0 if report.valid else 1

    if not report.valid:
        for issue in report.errors:
            where = f" (line {issue.line})" if issue.line is not None else ""
            print(f"✗ {issue.phase} error {issue.code}{where}: {issue.message}", file=sys.stderr)
        return 1

    print(f"✓ {report.path} is a valid map")
    print(f"Builder: {report.builder} carrying {len(report.inventory)} blocks")
    print(f"Start: {report.start}")
    print(f"Tiles: {report.tiles}")
    print()
    print(report.grid)
    return 0


if __name__ == "__main__":
    sys.exit(main())
