"""
==============================================================================
Inventory Tracker - Application Entry Point
==============================================================================

Console application with:
- In-memory product catalog
- Optional read-only seed file
- Interactive text menu

Usage:
------
    python -m inventory
    python -m inventory --seed data/products.json --threshold 10
    inventory-tracker --verbose

==============================================================================
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from inventory.catalog import Catalog
from inventory.config import Settings, get_settings
from inventory.core import AppException
from inventory.services import InventoryService
from inventory.shell import InventoryShell


logger = logging.getLogger(__name__)


# ============================================================================
# LOGGING SETUP
# ============================================================================

def configure_logging(level: int) -> None:
    """
    Configure logging for the inventory package.

    Output goes to stderr to keep stdout clean for the menu and reports.

    Args:
        level: Logging level for the 'inventory' logger
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )

    package_logger = logging.getLogger("inventory")
    package_logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    package_logger.handlers.clear()
    package_logger.addHandler(handler)


# ============================================================================
# APPLICATION
# ============================================================================

class Application:
    """
    Console application wiring settings, catalog, service and shell.

    Example:
        >>> app = Application(get_settings())
        >>> app.run()
    """

    def __init__(self, settings: Settings, seed_path: Optional[Path] = None) -> None:
        self._settings = settings
        self._seed_path = seed_path or settings.seed_path
        self._service = InventoryService(Catalog(), settings=settings)

    @property
    def service(self) -> InventoryService:
        return self._service

    def run(self, stdin=None, stdout=None, pause: bool = True) -> int:
        """Start up and run the interactive shell until exit."""
        self._startup()
        shell = InventoryShell(self._service, stdin=stdin, stdout=stdout, pause=pause)
        exit_code = shell.run()
        logger.info("🛑 Shutting down")
        return exit_code

    def _startup(self) -> None:
        logger.info(f"🚀 Starting {self._settings.app_name}")
        if self._seed_path is not None:
            self._load_seed(self._seed_path)

    def _load_seed(self, path: Path) -> None:
        """Load seed products; a bad file leaves the catalog empty."""
        try:
            count = self._service.load_seed(path)
            logger.info(f"✅ Seeded catalog with {count} products")
        except AppException as e:
            logger.error(f"❌ Failed to load seed file: {e.message}")


# ============================================================================
# ENTRY POINT
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inventory-tracker",
        description="In-memory inventory tracker with a text menu",
    )
    parser.add_argument('--seed', '-s', type=Path,
                        help='JSON file with products to load at startup')
    parser.add_argument('--threshold', '-t', type=int,
                        help='Default low stock threshold')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Only log errors')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if args.threshold is not None:
        if args.threshold < 0:
            print("Error: --threshold cannot be negative", file=sys.stderr)
            return 2
        settings = settings.model_copy(update={"low_stock_threshold": args.threshold})

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = settings.effective_log_level
    configure_logging(level)

    return Application(settings, seed_path=args.seed).run()


if __name__ == "__main__":
    sys.exit(main())
