#!/usr/bin/env python3
"""Generate a sample rental portfolio.

Adds synthetic properties through the portfolio service, records a share of
payments, and prints the dashboard summary. With ``--store json`` the rows
are kept in a JSON file so the portfolio can be reloaded later.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rent_ledger.config import DisplayConfig, LedgerConfig, StoreConfig
from rent_ledger.exceptions import RentLedgerError
from rent_ledger.generators import PropertyGenerator
from rent_ledger.ledger import build_receipt
from rent_ledger.logging import configure_logging
from rent_ledger.serialization import to_dict
from rent_ledger.service import PortfolioService
from rent_ledger.store import build_store

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments, using environment config as defaults."""
    config = LedgerConfig.from_env()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--count",
        type=int,
        default=12,
        help="Number of properties to generate (default: 12)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--payment-rate",
        type=float,
        default=0.5,
        help="Chance that a property in arrears gets a payment (default: 0.5)",
    )
    parser.add_argument(
        "--store",
        choices=["memory", "json"],
        default=config.store.backend,
        help="Store backend (default: %(default)s)",
    )
    parser.add_argument(
        "--path",
        type=Path,
        default=config.store.path or Path("local/properties.json"),
        help="JSON store file (default: %(default)s)",
    )
    parser.add_argument(
        "--receipts",
        type=Path,
        default=None,
        help="Write every property's receipt to this JSON file",
    )
    parser.add_argument(
        "--currency",
        default=config.display.currency,
        help="Currency code printed on receipts (default: %(default)s)",
    )
    parser.add_argument("--log-level", default=config.log_level)
    parser.add_argument("--log-format", choices=["standard", "json"], default=config.log_format)
    return parser.parse_args(argv)


def print_summary(service: PortfolioService, currency: str) -> None:
    """Print dashboard statistics."""
    summary = service.summary()
    print(f"\n{'='*60}")
    print("Portfolio Summary")
    print("=" * 60)
    print(f"  Total properties:    {summary.total_properties}")
    print(f"  Unpaid tenants:      {summary.unpaid_count}")
    print(f"  Rent collected:      {currency} {summary.total_collected:,}")
    print(f"  Outstanding:         {currency} {summary.total_outstanding:,}")
    print(f"  Total expected rent: {currency} {summary.total_rent:,}")
    print(f"  Total debt owed:     {currency} {summary.total_debt:,}")
    print(f"  Collection rate:     {summary.collection_rate}%")


def write_receipts(service: PortfolioService, path: Path, currency: str) -> None:
    """Export receipt data for every property."""
    receipts = [to_dict(build_receipt(prop, currency)) for prop in service.properties]
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(receipts, f, indent=2, ensure_ascii=False)
    logger.info("Saved %d receipts to %s", len(receipts), path)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = LedgerConfig(
        store=StoreConfig(
            backend=args.store,
            path=args.path if args.store == "json" else None,
        ),
        display=DisplayConfig(currency=args.currency),
        log_level=args.log_level,
        log_format=args.log_format,
        seed=args.seed,
    )
    configure_logging(config)

    try:
        service = PortfolioService(build_store(config.store))
        service.load()
        PropertyGenerator(seed=config.seed).populate(service, args.count, args.payment_rate)
        if args.receipts:
            write_receipts(service, args.receipts, config.display.currency)
    except RentLedgerError as exc:
        logger.error("Sample data generation failed: %s", exc)
        return 1

    print_summary(service, config.display.currency)
    return 0


if __name__ == "__main__":
    sys.exit(main())
