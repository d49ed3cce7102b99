# main.py

"""Entry point for the storefront application (TUI or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Terminal storefront: browse products and fill a basket.",
        epilog=f"Catalog API: {Settings.API_BASE_URL}",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_products",
        help="Print the catalog and exit. Omit all options for the TUI.",
    )
    mode.add_argument(
        "--product",
        type=int,
        default=None,
        metavar="ID",
        dest="product_id",
        help="Print one product by id and exit.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format for --list/--product (default: json).",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import StorefrontApp

    try:
        app = StorefrontApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("storefront TUI shutting down")


def _run_list(args: argparse.Namespace) -> None:
    """Print the catalog and exit."""
    from src.cli.runner import run_list_products

    sys.exit(run_list_products(args.output_format))


def _run_show(args: argparse.Namespace) -> None:
    """Print one product and exit."""
    from src.cli.runner import run_show_product

    sys.exit(run_show_product(args.product_id, args.output_format))


def main() -> None:
    """Route to the TUI (no options) or a headless command."""
    parser = _build_parser()
    args = parser.parse_args()

    headless = args.list_products or args.product_id is not None
    log_file = setup_logging(tui=not headless)
    logger.info("storefront starting, log file: %s", log_file)

    if args.list_products:
        _run_list(args)
    elif args.product_id is not None:
        _run_show(args)
    else:
        _run_tui()


if __name__ == "__main__":
    main()
