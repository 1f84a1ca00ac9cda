"""Tileman CLI: load a tile folder and report what was parsed."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path


def main():
    """Main CLI entry point for tileman commands."""
    try:
        tileman_version = get_version("tileman")
    except PackageNotFoundError:
        tileman_version = "dev"

    parser = argparse.ArgumentParser(
        prog="tileman",
        description="Tileman: load level editor tile folders into ordered categories"
    )
    parser.add_argument("--version", action="version", version=f"tileman {tileman_version}")
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parser debug output to stderr."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    load_parser = subparsers.add_parser(
        "load",
        help="Load a tile folder (root init plus subfolders)",
        parents=[parent_parser]
    )
    load_parser.add_argument(
        "root",
        type=Path,
        help="Path to the tile folder containing the root init document"
    )
    load_parser.add_argument(
        "--init-name",
        default="init.txt",
        help="Name of the init document in the root and in each subfolder"
    )
    load_parser.add_argument(
        "--color-name",
        default="color.txt",
        help="Name of the subfolder color document"
    )
    load_parser.add_argument(
        "--depth-aware-lists",
        action="store_true",
        help="Only split lists and points on top-level commas"
    )
    load_parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Write the full result as canonical JSON to this path"
    )
    load_parser.add_argument(
        "--errors-out",
        type=Path,
        default=None,
        help="Write every errored line with its error to this path"
    )
    load_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any line failed to parse"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "load":
        from .api import load_tile_init
        from .config import LoaderConfig
        from .kernel.errors import DeserError
        from ._internal.canonical_json import canonical_dumps

        try:
            config = LoaderConfig(
                init_filename=args.init_name,
                color_filename=args.color_name,
                depth_aware_lists=args.depth_aware_lists,
            )
            result = load_tile_init(args.root.resolve(), config)
        except DeserError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)

        report = result.to_report()
        if args.report is not None:
            args.report.parent.mkdir(parents=True, exist_ok=True)
            args.report.write_text(canonical_dumps(report, indent=2) + "\n", encoding="utf-8")

        if args.errors_out is not None:
            args.errors_out.parent.mkdir(parents=True, exist_ok=True)
            lines = [f"{line}\n    {error!r}" for line, error in result.tile_init.errored_lines]
            for name, errors in sorted(result.subfolder_errors.items()):
                lines.extend(f"[{name}] {line}\n    {error!r}" for line, error in errors)
            args.errors_out.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")

        if not args.quiet:
            tile_init = result.tile_init
            tile_count = sum(len(category.tiles) for category in tile_init.categories)
            print(f"[{'OK' if result.ok else 'WARN'}] Load complete")
            print(f"  Categories: {len(tile_init.categories)}")
            print(f"  Tiles: {tile_count}")
            print(f"  Errored lines: {result.error_count}")
            for category in tile_init.categories:
                source = f" ({category.subfolder.name})" if category.subfolder else ""
                print(f"  {category.index:>3} {category.name}{source}: {len(category.tiles)} tiles")
            if args.report is not None:
                print(f"  Report: {args.report}")

        if args.strict and not result.ok:
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
