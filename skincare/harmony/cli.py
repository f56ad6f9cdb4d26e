"""CLI entry point for Skincare Harmony."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date

from dotenv import load_dotenv

from .cabinet import (
    COSMETIC_CATEGORIES,
    CosmeticProduct,
    ExpirationStatus,
    ProductExpirationTracker,
    validate_product_input,
)
from .config import HarmonyConfig, load_config
from .db import ProductDB
from .sunscreen import (
    PA,
    PA_LEVELS,
    SPF,
    SPF_OPTIONS,
    ReapplicationTimerCalculator,
    uv_band,
    validate_timer_input,
)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="skincare-harmony",
        description="Sunscreen reapplication timer and skincare cabinet tracker",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to the configuration file (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # timer
    timer_parser = sub.add_parser("timer", help="Calculate the sunscreen reapplication timer")
    timer_parser.add_argument("--uv", type=float, default=None, help="Current UV index")
    timer_parser.add_argument(
        "--skin", type=int, default=None, choices=range(1, 7), metavar="{1-6}",
        help="Fitzpatrick skin type (1-6)",
    )
    scale = timer_parser.add_mutually_exclusive_group()
    scale.add_argument(
        "--spf", type=int, default=None, choices=SPF_OPTIONS, metavar="{5,10,...,75}",
        help="SPF value (multiple of 5 from 5 to 75)",
    )
    scale.add_argument(
        "--pa", type=int, default=None, choices=PA_LEVELS, metavar="{1-6}",
        help="PA level (1-6, PA+ to PA++++++)",
    )
    timer_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # products
    products_parser = sub.add_parser("products", help="Manage the skincare cabinet")
    psub = products_parser.add_subparsers(dest="action")

    add_parser = psub.add_parser("add", help="Add an opened product")
    add_parser.add_argument("name", type=str)
    add_parser.add_argument(
        "--opened", type=date.fromisoformat, required=True, metavar="YYYY-MM-DD",
        help="Date the product was opened",
    )
    add_parser.add_argument(
        "--pao", type=int, required=True, metavar="DAYS",
        help="Period After Opening in days",
    )
    add_parser.add_argument("--brand", type=str, default=None)
    add_parser.add_argument("--category", type=str, default=None, choices=COSMETIC_CATEGORIES)
    add_parser.add_argument("--notes", type=str, default=None)

    list_parser = psub.add_parser("list", help="List products by expiration")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    expiring_parser = psub.add_parser("expiring", help="List products expiring soon")
    expiring_parser.add_argument(
        "--days", type=int, default=None, help="Window in days (default from config)"
    )
    expiring_parser.add_argument("--json", action="store_true", help="Output as JSON")

    search_parser = psub.add_parser("search", help="Search by name or brand")
    search_parser.add_argument("query", type=str)
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    update_parser = psub.add_parser("update", help="Update a product")
    update_parser.add_argument("id", type=int)
    update_parser.add_argument("--name", type=str, default=None)
    update_parser.add_argument(
        "--opened", type=date.fromisoformat, default=None, metavar="YYYY-MM-DD"
    )
    update_parser.add_argument("--pao", type=int, default=None, metavar="DAYS")
    update_parser.add_argument("--brand", type=str, default=None)
    update_parser.add_argument(
        "--category", type=str, default=None, choices=COSMETIC_CATEGORIES
    )
    update_parser.add_argument("--notes", type=str, default=None)

    delete_parser = psub.add_parser("delete", help="Delete a product")
    delete_parser.add_argument("id", type=int)

    args = parser.parse_args(argv)

    if args.command is None or (args.command == "products" and args.action is None):
        parser.print_help()
        sys.exit(1)

    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    match args.command:
        case "timer":
            _cmd_timer(config, args)
        case "products":
            _cmd_products(config, args)


def _cmd_timer(config: HarmonyConfig, args) -> None:
    if args.uv is None:
        print("UV index not available. Pass the current reading with --uv.", file=sys.stderr)
        sys.exit(1)

    skin_type = args.skin if args.skin is not None else config.sunscreen.skin_type
    try:
        if args.spf is not None:
            protection = SPF(args.spf)
        elif args.pa is not None:
            protection = PA(args.pa)
        else:
            protection = config.sunscreen.protection()
        # Config values bypass argparse choices
        validate_timer_input(args.uv, skin_type, protection)
    except ValueError as e:
        print(f"Invalid timer input: {e}", file=sys.stderr)
        sys.exit(1)

    minutes = ReapplicationTimerCalculator().compute(args.uv, skin_type, protection)

    if args.json:
        data = {
            "uv_index": args.uv,
            "uv_band": uv_band(args.uv),
            "skin_type": skin_type,
            "protection": protection.label,
            "minutes": minutes,
        }
        print(json.dumps(data, indent=2))
    else:
        print(f"☀  UV index {args.uv:.1f} ({uv_band(args.uv)})")
        print(f"   Skin type {skin_type}, {protection.label}")
        print(f"Reapply sunscreen in {minutes} minutes.")


def _cmd_products(config: HarmonyConfig, args) -> None:
    user_id = config.profile.user_id or None
    db = ProductDB(config.database.path)
    try:
        match args.action:
            case "add":
                _products_add(db, user_id, config.cabinet.pao_options, args)
            case "list":
                _print_products(db.get_products(user_id), args.json)
            case "expiring":
                days = args.days if args.days is not None else config.cabinet.reminder_days
                _print_products(db.get_expiring_products(user_id, days), args.json)
            case "search":
                # Keep the alphabetical order from the query
                _print_products(
                    db.search_products(args.query, user_id), args.json, sort=False
                )
            case "update":
                _products_update(db, config.cabinet.pao_options, args)
            case "delete":
                if db.delete_product(args.id) == 0:
                    print(f"Product {args.id} not found.", file=sys.stderr)
                    sys.exit(1)
                print(f"Deleted product {args.id}.")
    finally:
        db.close()


def _products_add(
    db: ProductDB, user_id: str | None, pao_options: list[int], args
) -> None:
    try:
        validate_product_input(
            args.name, args.opened, args.pao, pao_options=pao_options
        )
    except ValueError as e:
        print(f"Invalid product: {e}", file=sys.stderr)
        sys.exit(1)

    product = CosmeticProduct(
        name=args.name.strip(),
        open_date=args.opened,
        pao_days=args.pao,
        brand=args.brand,
        category=args.category,
        notes=args.notes,
        user_id=user_id,
    )
    product_id = db.add_product(product)
    print(f"Added product {product_id}: {product.name} (expires {product.expiration_date})")


def _products_update(db: ProductDB, pao_options: list[int], args) -> None:
    product = db.get_product(args.id)
    if product is None:
        print(f"Product {args.id} not found.", file=sys.stderr)
        sys.exit(1)

    changes = {
        key: value
        for key, value in (
            ("name", args.name),
            ("open_date", args.opened),
            ("pao_days", args.pao),
            ("brand", args.brand),
            ("category", args.category),
            ("notes", args.notes),
        )
        if value is not None
    }
    updated = product.with_changes(**changes)
    try:
        validate_product_input(
            updated.name,
            updated.open_date,
            updated.pao_days,
            pao_options=pao_options if args.pao is not None else None,
        )
    except ValueError as e:
        print(f"Invalid product: {e}", file=sys.stderr)
        sys.exit(1)

    db.update_product(updated)
    print(f"Updated product {updated.id}: {updated.name} (expires {updated.expiration_date})")


_ANSI_COLORS: dict[str, str] = {
    "green": "\033[32m",
    "blue": "\033[34m",
    "orange": "\033[33m",
    "red": "\033[31m",
    "grey": "\033[90m",
}
_ANSI_RESET = "\033[0m"


def _status_label(status: ExpirationStatus, use_color: bool) -> str:
    """Status text, highlighted with the status color on a terminal."""
    if not use_color:
        return status.display_text
    return f"{_ANSI_COLORS[status.color]}{status.display_text}{_ANSI_RESET}"


def _print_products(
    products: list[CosmeticProduct], as_json: bool, sort: bool = True
) -> None:
    tracker = ProductExpirationTracker()
    if sort:
        products = tracker.sort_by_urgency(products)

    if as_json:
        data = []
        for p in products:
            info = tracker.status_of(p)
            data.append({
                "id": p.id,
                "name": p.name,
                "brand": p.brand,
                "category": p.category,
                "open_date": p.open_date.isoformat(),
                "pao_days": p.pao_days,
                "expiration_date": info.expiration_date.isoformat(),
                "days_until_expiration": info.days_until_expiration,
                "status": info.status.value,
                "color": info.status.color,
            })
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    if not products:
        print("No products added yet.")
        return
    use_color = sys.stdout.isatty()
    print(f"🧴 Products ({len(products)}):")
    for p in products:
        info = tracker.status_of(p)
        print(
            f"  [{p.id}] {p.name:<20} expires {info.expiration_date} "
            f"({info.days_until_expiration} days left)  "
            f"{_status_label(info.status, use_color)}"
        )
