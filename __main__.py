"""CLI entry point for swiftship.

This module acts as the central entry point for the project's CLI tools.
It wraps the code generator and is the only place that writes files.
"""

import argparse
import json
import subprocess
import sys
from dataclasses import fields
from pathlib import Path

from dotenv import load_dotenv
from pydantic_core import to_jsonable_python

from swiftship.catalog import CATALOG, ComponentCategory
from swiftship.config import EnvVar, GeneratorSettings, get_environment
from swiftship.core.errors import CodegenError
from swiftship.core.log import get_logger, setup_logging

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


# =============================================================================
# Generate Command
# =============================================================================


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate Swift sources from an app definition JSON file."""
    from swiftship.codegen import generate

    try:
        raw = json.loads(args.app.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read {args.app}: {e}")
        return 1

    settings = GeneratorSettings.from_environment(workers=args.workers)
    try:
        result = generate(raw, settings)
    except CodegenError as e:
        logger.error(f"Generation failed: {e}")
        if args.json_errors:
            print(json.dumps(e.to_dict(), indent=2))
        return 1

    output_dir = get_environment(EnvVar.SWIFTSHIP_OUTPUT_DIR, override=args.output)
    for file in result.files:
        if args.dry_run:
            print(f"// {file.path}\n{file.content}")
            continue
        target = output_dir / file.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(file.content, encoding="utf-8")
        logger.info(f"Wrote {target}")

    for warning in result.warnings:
        logger.warning(f"  {warning}")
    logger.info(f"{len(result.files)} file(s), {len(result.warnings)} warning(s)")
    return 0


def handle_generate_command(argv: list[str]) -> int:
    """Handle generate-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . generate",
        description="Generate a SwiftUI project from an app definition",
    )
    parser.add_argument(
        "app",
        type=Path,
        help="Path to the app definition JSON file",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output directory (default: SWIFTSHIP_OUTPUT_DIR or ./generated)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print files to stdout instead of writing them",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help="Threads used to build screens (default: SWIFTSHIP_WORKERS or 1)",
    )
    parser.add_argument(
        "--json-errors",
        action="store_true",
        help="Print errors as JSON for the calling layer",
    )
    args = parser.parse_args(argv)
    return cmd_generate(args)


# =============================================================================
# Catalog Command
# =============================================================================


def cmd_catalog(args: argparse.Namespace) -> int:
    """List registered component types."""
    metas = CATALOG.by_category(args.category) if args.category else list(CATALOG)

    if args.json:
        print(json.dumps([meta.to_dict() for meta in metas], indent=2))
        return 0

    for category in ComponentCategory:
        members = [meta for meta in metas if meta.category == category]
        if not members:
            continue
        print(f"\n  {category.value}:")
        for meta in members:
            print(f"    {meta.type:<20} {meta.name:<24} {meta.description}")
    print(f"\n  modifiers: {', '.join(spec.name for spec in CATALOG.modifiers())}")
    return 0


def handle_catalog_command(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        prog="python . catalog",
        description="Show the component catalog",
    )
    parser.add_argument(
        "--category",
        "-c",
        type=str,
        default=None,
        choices=[category.value for category in ComponentCategory],
        help="Only show one category",
    )
    parser.add_argument("--json", action="store_true", help="Output JSON")
    args = parser.parse_args(argv)
    return cmd_catalog(args)


# =============================================================================
# Tokens Command
# =============================================================================


def cmd_tokens(args: argparse.Namespace) -> int:
    """Resolve and show a design token set."""
    from swiftship.tokens import format_hex, format_oklch_css, generate_design_tokens

    try:
        tokens = generate_design_tokens(args.primary, accent=args.accent, is_dark=args.dark)
    except ValueError as e:
        logger.error(f"Invalid colour: {e}")
        return 1

    if args.json:
        print(json.dumps(to_jsonable_python(tokens), indent=2))
        return 0

    print(f"{tokens.name} ({'dark' if tokens.is_dark else 'light'})")
    for field in fields(tokens.colors):
        color = getattr(tokens.colors, field.name)
        print(f"  {field.name:<20} {format_oklch_css(color):<32} {format_hex(color)}")
    spacing = ", ".join(f"{key}={value:g}" for key, value in tokens.spacing.scale.items())
    print(f"  spacing: {spacing}")
    return 0


def handle_tokens_command(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        prog="python . tokens",
        description="Generate design tokens from a primary colour",
    )
    parser.add_argument(
        "--primary",
        "-p",
        type=str,
        default="#007AFF",
        help="Primary colour as hex or oklch() (default: #007AFF)",
    )
    parser.add_argument(
        "--accent",
        "-a",
        type=str,
        default=None,
        help="Accent colour (derived from primary when omitted)",
    )
    parser.add_argument("--dark", action="store_true", help="Generate dark tokens")
    parser.add_argument("--json", action="store_true", help="Output JSON")
    args = parser.parse_args(argv)
    return cmd_tokens(args)


# =============================================================================
# Test Command
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments and test tier options.

    Usage:
        python . test                # Run all tests
        python . test --unit         # Run only unit tests
        python . test --integration  # Run integration tests
        python . test -k "builder"   # Run tests matching pattern
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--integration": ["-m", "integration"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


# =============================================================================
# Main
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Generation ===")
    print("  generate   Generate a SwiftUI project from an app definition")
    print("  catalog    Show registered component types and modifiers")
    print("  tokens     Generate design tokens from a primary colour")
    print("\n=== Development ===")
    print("  test       Run the test suite")
    print("\nExamples:")
    print("  python . generate app.json -o out/")
    print("  python . generate app.json --dry-run")
    print("  python . catalog --category input")
    print('  python . tokens --primary "oklch(0.6 0.2 250)" --dark')
    print("  python . test --unit")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "generate": lambda: handle_generate_command(rest_args),
        "catalog": lambda: handle_catalog_command(rest_args),
        "tokens": lambda: handle_tokens_command(rest_args),
        "test": lambda: cmd_test(rest_args),
    }

    if command in commands:
        setup_logging(get_environment(EnvVar.SWIFTSHIP_LOG_LEVEL))
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
