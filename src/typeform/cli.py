"""CLI entry point for inspecting a Typeform form's responses."""

from __future__ import annotations

import argparse
import logging
import sys

from .client import Typeform
from .errors import TypeformError
from .models import Responses


def _print_page(page: Responses) -> None:
    for item in page.items:
        answered = len(item.answers or [])
        print(
            f"  {item.token}  {item.submitted_at:%Y-%m-%d %H:%M:%S}  "
            f"{answered} answers  score {item.calculated.score}"
        )

    total = page.total_items if page.total_items is not None else "?"
    print(f"{len(page.items)} of {total} responses")
    if page.last_token:
        print(f"Next page: typeform responses --after {page.last_token}")


# ── responses command ─────────────────────────────────────────────────

def cmd_responses(args: argparse.Namespace) -> None:
    """Fetch one page of responses and print a summary."""
    try:
        client = Typeform.from_env()
    except RuntimeError as e:
        print(f"Error: {e}")
        sys.exit(1)

    try:
        if args.after:
            page = client.responses_after(args.after)
        else:
            page = client.responses()
    except TypeformError as e:
        print(f"Error fetching from Typeform: {e}")
        sys.exit(1)

    if args.json:
        print(page.model_dump_json(indent=2))
        return
    _print_page(page)


# ── Main entry ────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="typeform",
        description="Read-only access to Typeform form responses",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP activity")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_responses = subparsers.add_parser("responses", help="Fetch a page of responses")
    p_responses.add_argument("--after", metavar="TOKEN", help="Only the response after this token")
    p_responses.add_argument("--json", action="store_true", help="Print the decoded page as JSON")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "responses":
        cmd_responses(args)


if __name__ == "__main__":
    main()
