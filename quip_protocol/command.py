"""Command-line entry point of the node."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from quip_protocol import chain_spec
from quip_protocol.chain_spec import ChainSpec

IMPL_NAME = "Substrate Node"
DESCRIPTION = "A solochain node for Quip protocol built with Substrate."
SUPPORT_URL = "support.anonymous.an"
COPYRIGHT_START_YEAR = 2017

_BUILD_SPEC_DEPRECATION = (
    "build-spec command will be removed after 1/04/2026. "
    "Use export-chain-spec command instead"
)


def load_spec(chain_id: str) -> ChainSpec:
    """Resolve a chain name or a path to a JSON file into a chain specification."""
    if chain_id == "dev":
        return chain_spec.development_chain_spec()
    if chain_id in ("", "local"):
        return chain_spec.local_chain_spec()
    if chain_id in ("local3", "local-3", "local_three_validator"):
        return chain_spec.local_three_validator_chain_spec()
    return ChainSpec.from_json_file(Path(chain_id))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="quip-node",
        description=DESCRIPTION,
        epilog=f"{IMPL_NAME}. Support: {SUPPORT_URL}",
    )
    subparsers = parser.add_subparsers(dest="subcommand", metavar="SUBCOMMAND")
    subparsers.required = True

    build_spec = subparsers.add_parser(
        "build-spec",
        help="Build a chain specification (deprecated; use export-chain-spec).",
    )
    build_spec.add_argument("--chain", default="", help="Chain name or path to a spec file.")

    export = subparsers.add_parser("export-chain-spec", help="Export the chain specification.")
    export.add_argument("--chain", default="local", help="Chain name or path to a spec file.")
    export.add_argument("-o", "--output", type=Path, help="File to write instead of stdout.")

    return parser


def _emit(spec: ChainSpec, output: Path | None) -> None:
    text = spec.to_json()
    if output is None:
        sys.stdout.write(text + "\n")
    else:
        output.write_text(text, encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the chosen subcommand."""
    args = build_parser().parse_args(argv)

    if args.subcommand == "build-spec":
        print(f"warning: {_BUILD_SPEC_DEPRECATION}", file=sys.stderr)

    try:
        spec = load_spec(args.chain)
        _emit(spec, getattr(args, "output", None))
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())