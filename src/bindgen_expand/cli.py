"""
Command-line interface for bindgen_expand.

Usage:
    bindgen-expand expand <manifest> -n <name> --pkg-version <version> [-o <output>]
    bindgen-expand config
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from bindgen_expand import __version__
from bindgen_expand.core.config import CARGO_ENV, TARGET_DIR_ENV, ExpandConfig
from bindgen_expand.core.expander import (
    TARGET_DIR_VAR,
    Expander,
    ExpansionRequest,
    build_command,
)
from bindgen_expand.core.runner import format_command
from bindgen_expand.errors import CompileError, ExpandError


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bindgen-expand",
        description="Macro-expand a Rust crate into a single source file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Expand crate 'demo' 0.1.0 and print the result
  bindgen-expand expand ./Cargo.toml -n demo --pkg-version 0.1.0

  # Write the expansion to a file, reusing a fixed target directory
  bindgen-expand expand ./Cargo.toml -n demo --pkg-version 0.1.0 -o demo.rs --target-dir ./target

  # Show the cargo command without running it
  bindgen-expand expand ./Cargo.toml -n demo --pkg-version 0.1.0 --dry-run

  # Show the resolved cargo driver and target directory
  bindgen-expand config

Environment:
  {CARGO_ENV}                     cargo driver to run (default: cargo)
  {TARGET_DIR_ENV}   reusable target directory (default: temporary)
""",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"bindgen-expand {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # expand command
    expand_parser = subparsers.add_parser(
        "expand",
        help="Expand a crate",
        description="Run cargo rustc --pretty=expanded for one package.",
    )
    expand_parser.add_argument(
        "manifest_path",
        type=Path,
        help="Path to Cargo.toml",
    )
    expand_parser.add_argument(
        "-n",
        "--name",
        required=True,
        help="Package name to expand",
    )
    expand_parser.add_argument(
        "--pkg-version",
        dest="pkg_version",
        required=True,
        help="Package version (selects the package within a workspace)",
    )
    expand_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write expanded source to this file (default: stdout)",
    )
    expand_parser.add_argument(
        "--cargo",
        help=f"Cargo driver to run (overrides ${CARGO_ENV})",
    )
    expand_parser.add_argument(
        "--target-dir",
        type=Path,
        help=f"Reusable target directory, never removed (overrides ${TARGET_DIR_ENV})",
    )
    expand_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the command that would be run without running it",
    )
    expand_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print the cargo command to stderr before running it",
    )

    # config command
    subparsers.add_parser(
        "config",
        help="Show resolved configuration",
        description="Show the cargo driver and target directory that would be used.",
    )

    return parser


def _resolve_config(args: argparse.Namespace) -> ExpandConfig:
    return ExpandConfig.from_env().with_overrides(
        cargo=args.cargo,
        target_dir=args.target_dir,
    )


def cmd_expand(args: argparse.Namespace) -> int:
    """Handle the expand command."""
    config = _resolve_config(args)
    request = ExpansionRequest(
        manifest_path=args.manifest_path,
        package_name=args.name,
        version=args.pkg_version,
    )

    if args.dry_run or args.verbose:
        if config.uses_temporary_target:
            target = "<temporary>"
        else:
            target = str(config.target_dir)
        cmd = format_command(build_command(config.cargo, request))
        line = f"{TARGET_DIR_VAR}={target} {cmd}"
        if args.dry_run:
            print("Would run:")
            print(f"  {line}")
            return 0
        print(line, file=sys.stderr)

    try:
        src = Expander(config).expand(request)
    except CompileError as e:
        print(f"Error: failed to expand {request.selector}", file=sys.stderr)
        if e.stderr:
            print(e.stderr, file=sys.stderr, end="" if e.stderr.endswith("\n") else "\n")
        return 1
    except ExpandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            args.output.write_text(src, encoding="utf-8")
        except OSError as e:
            print(f"Error: cannot write {args.output}: {e}", file=sys.stderr)
            return 1
        if args.verbose:
            print(f"Output: {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(src)

    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Handle the config command."""
    config = ExpandConfig.from_env()
    for key, value in config.describe().items():
        print(f"{key}: {value}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "expand": cmd_expand,
        "config": cmd_config,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
