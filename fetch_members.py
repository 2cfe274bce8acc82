"""
Fetch members of Congress from the ProPublica Congress API.

Examples:
    python fetch_members.py members --congress 115 --chamber senate
    python fetch_members.py by-state --state VT --format csv -o vt.csv
    python fetch_members.py member --member-id K000388
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

import congress
from congress import CongressAPIError, Transport
from congress.models import Record
from cli_utils import log_header, log_step, records_to_rows


QUERIES = ["members", "member", "by-state", "by-district", "both-chambers", "new", "leaving"]

# Arguments each query needs in addition to the transport
REQUIRED_ARGS = {
    "members": ["congress", "chamber"],
    "member": ["member_id"],
    "by-state": ["chamber", "state"],
    "by-district": ["chamber", "state", "district"],
    "both-chambers": ["state"],
    "new": [],
    "leaving": ["congress", "chamber"],
}


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Look up members of Congress and write them as JSON or CSV.",
    )
    parser.add_argument(
        "query",
        choices=QUERIES,
        help="Which lookup to run.",
    )
    parser.add_argument("--congress", type=int, help="Congress number, e.g. 115.")
    parser.add_argument("--chamber", help="Chamber name, usually 'house' or 'senate'.")
    parser.add_argument("--state", help="Two-letter state code, e.g. 'VT'.")
    parser.add_argument("--district", type=int, help="Congressional district number.")
    parser.add_argument("--member-id", help="Bioguide ID, e.g. 'K000388'.")
    parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Output format.",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Where to write results (defaults to stdout).",
    )
    return parser.parse_args(argv)


def validate_args(args: argparse.Namespace) -> None:
    missing = [name for name in REQUIRED_ARGS[args.query] if getattr(args, name) in (None, "")]
    if missing:
        flags = ", ".join("--" + name.replace("_", "-") for name in missing)
        raise ValueError(f"'{args.query}' requires: {flags}")


def run_query(transport: Transport, args: argparse.Namespace) -> List[Record]:
    """Dispatch the selected query to the matching API operation."""
    if args.query == "members":
        return congress.get_members(transport, args.congress, args.chamber)
    if args.query == "member":
        member = congress.get_member(transport, args.member_id)
        return [member] if member else []
    if args.query == "by-state":
        return congress.get_members_by_state(transport, args.chamber, args.state)
    if args.query == "by-district":
        return congress.get_members_by_district(transport, args.chamber, args.state, args.district)
    if args.query == "both-chambers":
        return congress.get_members_by_state_both_chambers(transport, args.state)
    if args.query == "new":
        return congress.get_new_members(transport)
    return congress.get_departing_members(transport, args.congress, args.chamber)


def render_output(records: List[Record], output_format: str) -> str:
    if output_format == "csv":
        return pd.DataFrame(records_to_rows(records)).to_csv(index=False)
    return json.dumps([record.to_dict() for record in records], indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        validate_args(args)
        transport = Transport.from_env()
    except ValueError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    log_header(f"🏛️ Congress API: {args.query}")
    log_step(f"Endpoint: {transport.endpoint}")

    try:
        records = run_query(transport, args)
    except CongressAPIError as exc:
        log_step(f"❌ {type(exc).__name__}: {exc}")
        return 1

    log_step(f"✅ Fetched {len(records)} records")
    text = render_output(records, args.format)

    if args.output:
        args.output.write_text(text, encoding="utf-8")
        log_step(f"Wrote {args.output}")
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
