"""Command-line driver for QuantumBooks.

Wires the store to console collaborators, registers a sample catalogue,
and either replays the demo scenarios or performs a single purchase.

Usage:
    quantumbooks demo
    quantumbooks purchase P001 --quantity 2 --address Madinaty
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Any

import pydantic

from quantumbooks.config import Settings, get_settings
from quantumbooks.core.clock import Clock, FixedClock, SystemClock
from quantumbooks.core.exceptions import QuantumBooksError
from quantumbooks.core.logging import configure_logging, get_logger, log_context
from quantumbooks.core.output import ConsoleSink, OutputSink
from quantumbooks.models.book import DigitalBook, PhysicalBook, ShowcaseBook
from quantumbooks.schemas.purchase import PurchaseRequest, PurchaseResult
from quantumbooks.services.bookstore import Bookstore
from quantumbooks.services.fulfillment import ConsoleMailService, ConsoleShippingService

logger = get_logger(__name__)


def resolve_clock(settings: Settings) -> Clock:
    """Use the configured year when set, the system date otherwise."""
    if settings.current_year is not None:
        return FixedClock(settings.current_year)
    return SystemClock()


def build_demo_store(
    settings: Settings,
    sink: OutputSink,
    clock: Clock | None = None,
) -> Bookstore:
    """Create a store holding the sample catalogue.

    Args:
        settings: Application settings (store name, currency)
        sink: Where every notice is written
        clock: Year source; defaults to resolve_clock(settings)

    Returns:
        Bookstore with one physical, one digital and one showcase book
    """
    if clock is None:
        clock = resolve_clock(settings)

    shipping = ConsoleShippingService(sink, store_name=settings.store_name)
    mail = ConsoleMailService(sink, store_name=settings.store_name)

    store = Bookstore(
        sink,
        clock=clock,
        store_name=settings.store_name,
        currency=settings.currency,
    )
    store.register_book(
        PhysicalBook("P001", "paperbook", 2008, 120.0, 3, "Khaled", shipping)
    )
    store.register_book(DigitalBook("E001", "Ebook", 2023, 150.0, 2, "Mai", mail))
    store.register_book(ShowcaseBook("D001", "Demo", 2020, 0.0, 1, "Unknown"))
    return store


def _attempt(
    scenario: str,
    sink: OutputSink,
    settings: Settings,
    action: Callable[[], Any],
) -> bool:
    """Run one scenario, reporting store errors instead of raising them."""
    sink.emit(f"{'-' * 26}{scenario}{'-' * 26}")
    with log_context(scenario=scenario):
        try:
            action()
        except QuantumBooksError as exc:
            logger.warning("scenario_failed", error_code=exc.code, error=exc.message)
            sink.emit(f"{settings.store_name}: {exc.message}")
            return False
    return True


def run_demo(
    settings: Settings | None = None,
    sink: OutputSink | None = None,
    clock: Clock | None = None,
) -> Bookstore:
    """Replay the demo scenarios against the sample catalogue.

    Returns:
        The store in its final state, for inspection
    """
    if settings is None:
        settings = get_settings()
    if sink is None:
        sink = ConsoleSink()
    store = build_demo_store(settings, sink, clock)

    sink.emit(f"{settings.store_name}:")
    _attempt(
        "Try buying a physical book",
        sink,
        settings,
        lambda: store.process_purchase("P001", 2, "habiba@gmail.com", "madinaty"),
    )
    _attempt(
        "Try buying a digital book",
        sink,
        settings,
        lambda: store.process_purchase("E001", 1, "habiba@gmail.com", ""),
    )
    _attempt(
        "Try buying a showcase book (should fail)",
        sink,
        settings,
        lambda: store.process_purchase("D001", 1, "hh@gmail.com", "whatever"),
    )
    _attempt(
        "Try buying an unknown ISBN (should fail)",
        sink,
        settings,
        lambda: store.process_purchase("UNKNOWN", 1, "hh@gmail.com", "whatever"),
    )

    for book in store.clear_old_books(settings.max_book_age):
        sink.emit(
            f"{settings.store_name}: Removed outdated book: "
            f"{book.title} ({book.publication_year})"
        )
    return store


def purchase_command(
    args: argparse.Namespace,
    settings: Settings,
    sink: OutputSink,
    output: OutputSink | None = None,
) -> int:
    """Buy copies from the sample catalogue. Returns the exit status.

    Store notices go to ``sink``. With ``--json`` the result is written to
    ``output`` (``sink`` when not given) as a single JSON line.
    """
    try:
        request = PurchaseRequest(
            isbn=args.isbn,
            quantity=args.quantity,
            email=args.email,
            address=args.address,
        )
    except pydantic.ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            sink.emit(f"{settings.store_name}: invalid {field}: {error['msg']}")
        return 2

    store = build_demo_store(settings, sink)
    try:
        total = store.process_purchase(
            request.isbn, request.quantity, request.email, request.address
        )
    except QuantumBooksError as exc:
        logger.warning("purchase_failed", isbn=request.isbn, error_code=exc.code)
        sink.emit(f"{settings.store_name}: {exc.message}")
        return 1

    if args.output_json:
        result = PurchaseResult(
            isbn=request.isbn,
            quantity=request.quantity,
            total=total,
            currency=settings.currency,
            remaining_stock=store.get_book(request.isbn).quantity_in_stock,
        )
        (output if output is not None else sink).emit(result.model_dump_json())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quantumbooks",
        description="QuantumBooks CLI - a small bookstore inventory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo                                        # Replay the demo scenarios
  %(prog)s purchase P001 --quantity 2 --address Cairo  # Ship two paper copies
  %(prog)s purchase E001 --email me@example.com --json # Email an ebook
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("demo", help="Run the demo scenarios")

    purchase_parser = subparsers.add_parser(
        "purchase", help="Buy a book from the sample catalogue"
    )
    purchase_parser.add_argument("isbn", help="Book ISBN (P001, E001, D001)")
    purchase_parser.add_argument(
        "--quantity", type=int, default=1, help="Number of copies (default: 1)"
    )
    purchase_parser.add_argument("--email", default="", help="Delivery email")
    purchase_parser.add_argument("--address", default="", help="Shipping address")
    purchase_parser.add_argument(
        "--json",
        dest="output_json",
        action="store_true",
        help="Print the result as JSON",
    )
    return parser


def cli(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    settings = get_settings()
    configure_logging(settings)
    sink = ConsoleSink()

    if args.command == "purchase":
        if args.output_json:
            # stdout carries only the JSON result
            return purchase_command(args, settings, ConsoleSink(sys.stderr), sink)
        return purchase_command(args, settings, sink)

    run_demo(settings, sink)
    return 0


if __name__ == "__main__":
    raise SystemExit(cli())
