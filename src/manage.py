"""Storefront management CLI.

Seeds and lists the remote menu, and inspects or clears the persisted cart
of the configured origin.

Usage:
    python src/manage.py seed-menu                 # Publish the demo menu
    python src/manage.py seed-menu --file menu.json
    python src/manage.py list-menu
    python src/manage.py show-cart
    python src/manage.py reset-cart
"""

import argparse
import asyncio
import json
import sys

from storefront.config import load_settings
from storefront.domain import storefront
from storefront.session import build_session
from storefront.storage import create_store


async def seed_menu(session, path=None):
    """Publish menu records from a JSON file (or the demo menu) to the menu path."""
    records = None
    if path:
        with open(path, encoding="utf-8") as fh:
            records = json.load(fh)

    result = await session.catalog.seed(records)
    if not result.success:
        print(f"Seeding failed after {len(result.data or [])} item(s): {result.error}")
        return 1
    print(f"Published {len(result.data)} menu item(s) to {session.catalog.path}.")
    return 0


async def list_menu(session):
    """Print the menu as served by the remote catalog."""
    result = await session.catalog.load_menu()
    if not result.success:
        print(f"Could not load menu: {result.error}")
        return 1
    for item in result.data:
        print(f"{item.item_id:<24} {item.name:<24} ${item.price:>7.2f}  {item.description or ''}")
    return 0


def show_cart(session):
    """Print the persisted cart of the configured origin."""
    print(json.dumps(session.cart.state.to_dict(), indent=2))
    return 0


def reset_cart(settings):
    """Forget the persisted cart of the configured origin."""
    create_store(settings).delete(settings.cart_key)
    print(f"Cart {settings.cart_key!r} cleared for origin {settings.origin!r}.")
    return 0


async def _run(args):
    session = build_session(load_settings())
    try:
        if args.command == "seed-menu":
            return await seed_menu(session, args.file)
        if args.command == "list-menu":
            return await list_menu(session)
        if args.command == "show-cart":
            return show_cart(session)
        if args.command == "reset-cart":
            return reset_cart(session.settings)
        return 1
    finally:
        await session.aclose()


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    seed_parser = subparsers.add_parser("seed-menu", help="Publish menu items to the remote catalog")
    seed_parser.add_argument("--file", help="JSON file with a list of {name, description, price} records")

    subparsers.add_parser("list-menu", help="List the menu served by the remote catalog")
    subparsers.add_parser("show-cart", help="Print the persisted cart")
    subparsers.add_parser("reset-cart", help="Delete the persisted cart")

    args = parser.parse_args()

    storefront.init()
    with storefront.domain_context():
        sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
