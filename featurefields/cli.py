# ==============================================
# CLI - Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Compute field collections for payload files from the shell.
#
# COMMANDS:
# ---------
# 1. Compute the fields for a payload:
#    python -m featurefields.cli compute payload.json
#    python -m featurefields.cli compute payload.json --context layer --out-fields "name, pop"
#    python -m featurefields.cli compute payload.json --sample sample.json
#
# 2. Statistics helpers (payload is a JSON list of statistics rows,
#    or an object with a "statistics" list):
#    python -m featurefields.cli aliases stats.json
#    python -m featurefields.cli stat-fields stats.json
#
# Output is JSON on stdout; discrepancy warnings go to stderr.
#
# ==============================================

import argparse
import json
import sys
from typing import Any, List, Optional

from .collection import (
    FieldOptions,
    compute_collection,
    create_field_aliases,
    create_stat_fields,
)
from .exceptions import FeatureFieldsError


def _load_json(path: str) -> Any:
    with open(path, 'r') as f:
        return json.load(f)


def _statistics_rows(payload: Any) -> List[dict]:
    if isinstance(payload, dict):
        return payload.get("statistics") or []
    return payload


def _warn(message: str) -> None:
    print(f"⚠ {message}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="featurefields",
        description="Compute Esri field collections from metadata or sample data."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    compute = subparsers.add_parser("compute", help="Compute the field collection for a payload")
    compute.add_argument("payload", help="JSON file with metadata/features/statistics")
    compute.add_argument("--context", default=None, help='Request context, e.g. "layer"')
    compute.add_argument("--out-fields", default=None, help='Comma-separated field names or "*"')
    compute.add_argument("--sample", default=None, help="JSON file with a fallback attribute sample")

    aliases = subparsers.add_parser("aliases", help="Field aliases for statistics rows")
    aliases.add_argument("payload", help="JSON file with statistics rows")

    stat_fields = subparsers.add_parser("stat-fields", help="Field descriptors for statistics rows")
    stat_fields.add_argument("payload", help="JSON file with statistics rows")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        payload = _load_json(args.payload)

        if args.command == "compute":
            options = FieldOptions(
                attribute_sample=_load_json(args.sample) if args.sample else None,
                out_fields=args.out_fields
            )
            fields = compute_collection(payload, args.context, options, warn=_warn)
            result = [field.to_dict() for field in fields]
        elif args.command == "aliases":
            result = create_field_aliases(_statistics_rows(payload))
        else:
            result = create_stat_fields(_statistics_rows(payload))
    except (OSError, json.JSONDecodeError, FeatureFieldsError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
