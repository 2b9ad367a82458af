"""strenum command line entry point.

Usage::

    strenum ./internal Status backlog,in_review,done
    python -m strenum.cli ./internal Status backlog in_review done --stdout
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from strenum.codegen import (
    CodegenInvalidError,
    EnumGenerator,
    EnumSpec,
    GofmtUnavailableError,
    StrenumError,
)
from strenum.config import Config
from strenum.utils import print_error, print_success, print_summary_table

EXIT_USER_ERROR = 1
EXIT_INTERNAL_ERROR = 3


def split_variants(arguments: list[str]) -> list[str]:
    """Split every VARIANTS argument on commas, keeping order."""
    variants: list[str] = []
    for argument in arguments:
        variants.extend(argument.split(","))
    return variants


async def _run(config: Config, type_name: str, variants: list[str], to_stdout: bool) -> None:
    generator = EnumGenerator(config)
    if to_stdout:
        artifact = await generator.build(EnumSpec.build(type_name, *variants))
        sys.stdout.buffer.write(artifact.source)
        sys.stdout.flush()
        return

    path = await generator.generate(type_name, *variants)
    print_summary_table(
        {
            "Type": type_name,
            "Variants": str(len(variants)),
            "File": str(path),
        },
        title="strenum",
    )
    print_success(f"Generated {path}")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``strenum`` / ``python -m strenum.cli``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="strenum",
        description="Generate a closed, string-backed Go enum package",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  strenum ./internal Status backlog,in_review,done\n"
            "  strenum ./internal Color red green blue --stdout\n"
            "  strenum ./internal Color red,green --gofmt /usr/local/go/bin/gofmt\n"
        ),
    )

    parser.add_argument(
        "dir", help="Directory the enum package is created in (overrides the config)"
    )
    parser.add_argument("type_name", metavar="TYPENAME", help="Enum type name, e.g. Status")
    parser.add_argument(
        "variants",
        metavar="VARIANTS",
        nargs="+",
        help="Variant values; each argument may hold several, comma-separated",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON config file (defaults come from STRENUM_* environment variables)",
    )
    parser.add_argument("--gofmt", default=None, help="gofmt executable to validate with")
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Skip gofmt validation and write the rendered source as-is",
    )
    parser.add_argument(
        "--require-gofmt",
        action="store_true",
        help="Fail if gofmt is not installed instead of warning",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated source instead of writing a file",
    )

    args = parser.parse_args(argv)

    try:
        config = Config.load(Path(args.config)) if args.config else Config.from_env()
    except (OSError, ValueError) as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(EXIT_USER_ERROR)

    # DIR always wins over output_dir from the config file or STRENUM_OUTPUT_DIR
    config.output_dir = Path(args.dir)
    if args.gofmt:
        config.gofmt.path = args.gofmt
    if args.no_format:
        config.gofmt.enabled = False
    if args.require_gofmt:
        config.gofmt.required = True

    variants = split_variants(args.variants)

    try:
        asyncio.run(_run(config, args.type_name, variants, args.stdout))
    except CodegenInvalidError as exc:
        print_error(f"Internal error, generated code is invalid: {exc}")
        sys.exit(EXIT_INTERNAL_ERROR)
    except (StrenumError, GofmtUnavailableError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(EXIT_USER_ERROR)


if __name__ == "__main__":
    main()
