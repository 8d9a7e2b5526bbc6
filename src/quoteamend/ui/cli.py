from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from quoteamend.adapters.draft_values import load_draft_edits
from quoteamend.app import build_service
from quoteamend.config import configure_logging
from quoteamend.domain.amendments import ActionStatus
from quoteamend.domain.export import CSV_FILENAME

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from quoteamend.domain.amendments import QuoteAmendmentService

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--quote-id",
        type=str,
        required=True,
        help="Id of the quote whose lines are reviewed",
    )
    common.add_argument(
        "--remote",
        action="store_true",
        help="Use the remote record service instead of the local database",
    )

    parser = argparse.ArgumentParser(description="Review and amend quote lines")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("lines", parents=[common], help="List the quote lines")
    subparsers.add_parser("summary", parents=[common], help="Show live quantity per product")

    save = subparsers.add_parser("save", parents=[common], help="Save draft edits")
    save.add_argument(
        "--edits",
        type=Path,
        required=True,
        help="JSON file with the draft values captured by the editing surface",
    )

    cancel = subparsers.add_parser("cancel", parents=[common], help="Cancel quote lines")
    cancel.add_argument("ids", nargs="*", help="Ids of the quote lines to cancel")

    undo = subparsers.add_parser("undo", parents=[common], help="Undo amendments")
    undo.add_argument("ids", nargs="*", help="Ids of the amendment lines to undo")

    export = subparsers.add_parser("export", parents=[common], help="Export lines as CSV")
    export.add_argument(
        "--output",
        type=Path,
        default=Path(CSV_FILENAME),
        help="Destination file (default: %(default)s)",
    )

    return parser.parse_args(list(argv))


def _print_lines(service: QuoteAmendmentService) -> None:
    lines = service.quote_lines()
    for line in lines:
        marker = f" <- {line.amended_from_id}" if line.amended_from_id else ""
        print(  # noqa: T201
            f"{line.id}\t{line.display_name}\t{line.product_code}\t"
            f"{line.quantity}\t{line.net_price}\t{line.amend_type or ''}{marker}"
        )
    log.info("Quote %s has %s lines", service.quote_id, len(lines))


def _print_summary(service: QuoteAmendmentService) -> None:
    for summary in service.product_summary():
        label = summary.product_name or summary.product_code
        print(f"{summary.product_code}\t{label}\t{summary.total_quantity}")  # noqa: T201


def _run(parsed_args: argparse.Namespace) -> bool:
    """Execute the selected command; return whether it fully succeeded."""

    edits = load_draft_edits(parsed_args.edits) if parsed_args.command == "save" else None
    service = build_service(parsed_args.quote_id, remote=parsed_args.remote)

    if parsed_args.command == "lines":
        _print_lines(service)
        return True
    if parsed_args.command == "summary":
        _print_summary(service)
        return True
    if parsed_args.command == "export":
        service.export_csv(parsed_args.output)
        return True

    if parsed_args.command == "save" and edits is not None:
        result = service.save_changes(edits)
    elif parsed_args.command == "cancel":
        result = service.cancel_selected(parsed_args.ids)
    elif parsed_args.command == "undo":
        result = service.undo_amendments(parsed_args.ids)
    else:
        raise ValueError(f"Unsupported command: {parsed_args.command}")
    log.info(
        "%s finished: status=%s, updated=%s, inserted=%s, deleted=%s",
        parsed_args.command,
        result.status,
        result.updated,
        result.inserted,
        result.deleted,
    )
    return result.status is not ActionStatus.FAILED


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        succeeded = _run(parsed_args)
    except ValueError:
        log.exception("Invalid input for %s", parsed_args.command)
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while amending quote %s", parsed_args.quote_id)
        sys.exit(1)
    if not succeeded:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point: load ``.env`` and install the SIGINT handler."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
