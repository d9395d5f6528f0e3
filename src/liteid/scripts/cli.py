"""Command line entrypoint for generating and inspecting identifiers."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

import structlog

from liteid.config.settings import get_settings
from liteid.models.variants import VARIANT_KINDS, Prefixed, parse_variant
from liteid.services import IdentifierService
from liteid.utils.errors import LiteIDError
from liteid.utils.logging import configure_logging

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="liteid", description="Opaque identifier toolkit")
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Generate identifiers")
    generate.add_argument("--variant", choices=VARIANT_KINDS, default="standard")
    generate.add_argument("--arg", default=None, help="Tag or prefix for the variant")
    generate.add_argument(
        "--no-encrypt", action="store_true", help="Use the raw seed instead of its digest"
    )
    generate.add_argument("--length", type=int, default=None, help="Core length (minimum 8)")
    generate.add_argument("--count", type=int, default=1, help="Number of identifiers")

    decode = commands.add_parser("decode", help="Split an identifier into its parts")
    decode.add_argument("value")

    validate = commands.add_parser("validate", help="Check identifier syntax")
    validate.add_argument("value")
    return parser


def _generate(service: IdentifierService, args: argparse.Namespace) -> int:
    argument = args.arg
    if args.variant == Prefixed.kind and argument is None:
        argument = service.settings.prefix
    variant = parse_variant(args.variant, argument)
    encrypt = False if args.no_encrypt else None
    if args.count < 0:
        raise LiteIDError("--count must be non-negative")
    for identifier in service.generate_many(args.count, variant, encrypt, args.length):
        print(identifier.value)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
        configure_logging(settings=settings.logging)
        service = IdentifierService(settings=settings.identifiers)
        if args.command == "generate":
            return _generate(service, args)
        if args.command == "decode":
            print(json.dumps(service.decode(service.wrap(args.value)), sort_keys=True))
            return 0
        valid = service.validate(args.value)
        print("valid" if valid else "invalid")
        return 0 if valid else 1
    except LiteIDError as exc:
        logger.error("cli.failed", command=args.command, problem=exc.problem.model_dump())
        return 2


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    sys.exit(main())
