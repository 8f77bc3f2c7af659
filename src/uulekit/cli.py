"""Command line interface for encoding and decoding UULE tokens.

Usage
-----
    uulekit encode-v1 "Queens County" "New York" "United States"
    uulekit encode-v2 --lat 37.421 --long -12.2084 --radius-meters 10
    uulekit decode a+cm9sZToxCnByb2R1Y2VyOjEy...
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from uulekit._constants import meters_to_radius
from uulekit.config import UuleDefaults
from uulekit.coordinates import parse_degrees
from uulekit.exceptions import UuleError
from uulekit.models import UulevOneRecord, UulevTwoRecord, wall_clock_millis
from uulekit.tokens import decode_token

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="uulekit", description="Encode and decode Google UULE location tokens.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    v1 = sub.add_parser("encode-v1", help="Encode a place name as a w+ token")
    v1.add_argument("parts", nargs="+", help="Place name, or its components (city, region, country)")
    v1.add_argument("--role", type=int, help="Role byte (default 2)")
    v1.add_argument("--producer", type=int, help="Producer byte (default 32)")

    v2 = sub.add_parser("encode-v2", help="Encode a coordinate as an a+ token")
    v2.add_argument("--lat", required=True, help="Latitude in degrees")
    v2.add_argument("--long", required=True, help="Longitude in degrees")
    radius = v2.add_mutually_exclusive_group()
    radius.add_argument("--radius", type=int, help="Encoded radius (-1 for an exact point)")
    radius.add_argument("--radius-meters", type=float, help="Radius in meters, scaled by 620")
    v2.add_argument("--role", type=int, help="Role (default 1)")
    v2.add_argument("--producer", type=int, help="Producer (default 12)")
    v2.add_argument("--provenance", type=int, help="Provenance (default 0)")
    v2.add_argument("--timestamp", type=int, help="Unix epoch milliseconds (default: now)")

    dec = sub.add_parser("decode", help="Decode a w+ or a+ token")
    dec.add_argument("token", help="UULE token")
    dec.add_argument("--text", action="store_true", help="Print the UULEv2 intermediate text instead of JSON")
    return parser


def _pick(value: int | None, default: int) -> int:
    return default if value is None else value


def _encode_v1(args: argparse.Namespace, defaults: UuleDefaults) -> str:
    name = UulevOneRecord.from_parts(*args.parts).canonical_name
    record = UulevOneRecord(
        role=_pick(args.role, defaults.v1_role),
        producer=_pick(args.producer, defaults.v1_producer),
        canonical_name=name,
    )
    return record.encode()


def _encode_v2(args: argparse.Namespace, defaults: UuleDefaults) -> str:
    if args.radius_meters is not None:
        radius = meters_to_radius(args.radius_meters)
    else:
        radius = _pick(args.radius, defaults.v2_radius)
    record = UulevTwoRecord(
        role=_pick(args.role, defaults.v2_role),
        producer=_pick(args.producer, defaults.v2_producer),
        provenance=_pick(args.provenance, defaults.v2_provenance),
        timestamp=_pick(args.timestamp, wall_clock_millis()),
        lat=parse_degrees(args.lat),
        long=parse_degrees(args.long),
        radius=radius,
    )
    return record.encode()


def _decode(args: argparse.Namespace) -> str:
    record = decode_token(args.token)
    if args.text:
        if not isinstance(record, UulevTwoRecord):
            raise ValueError("--text is only available for UULEv2 (a+) tokens")
        return record.to_text()
    return json.dumps({"version": record.VERSION, **record.model_dump()}, indent=2, ensure_ascii=False)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        defaults = UuleDefaults.from_env()
        if args.command == "encode-v1":
            output = _encode_v1(args, defaults)
        elif args.command == "encode-v2":
            output = _encode_v2(args, defaults)
        else:
            output = _decode(args)
    except (UuleError, ValueError) as exc:
        _logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
