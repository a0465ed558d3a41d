#!/usr/bin/env python3
"""
Inspect and maintain the client-side catalog cache from the terminal.

  python scripts/catalog_admin.py list --category anime
  python scripts/catalog_admin.py search hoodie --currency INR
  python scripts/catalog_admin.py checkout messi-inter-miami-jersey --country IN --quantity 2
  python scripts/catalog_admin.py sync            # pull from the backend
  python scripts/catalog_admin.py reset           # back to bundled defaults

Client state lives wherever storefront.bootstrap puts it (REDIS_URL,
STOREFRONT_STATE_FILE, or memory for a one-off run).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from storefront.bootstrap import StorefrontContext, build_context
from storefront.integrations.response_wrappers import CatalogApiError


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def print_products(ctx: StorefrontContext, products) -> None:
    code = ctx.commerce.currency_code
    if not products:
        print("(no products)")
        return
    for p in products:
        pricing = ctx.resolver.price_product(p, code)
        flags = " ".join(f for f, on in (("trending", p.is_trending), ("exclusive", p.is_exclusive)) if on)
        print(f"{p.id:32} {pricing.formatted_price:>14}  -{pricing.discount_percent:>2}%  [{p.category}/{p.subcategory}] {flags}")


def cmd_list(ctx: StorefrontContext, args) -> int:
    if args.trending:
        products = ctx.catalog.trending(args.limit)
    elif args.category:
        products = ctx.catalog.by_category(args.category)
    elif args.subcategory:
        products = ctx.catalog.by_subcategory(args.subcategory)
    else:
        products = ctx.catalog.products
    print_products(ctx, products)
    return 0


def cmd_search(ctx: StorefrontContext, args) -> int:
    print_products(ctx, ctx.catalog.search(args.query))
    return 0


def cmd_checkout(ctx: StorefrontContext, args) -> int:
    product = ctx.catalog.by_id(args.product_id)
    if product is None:
        print(f"Unknown product: {args.product_id}", file=sys.stderr)
        return 1

    code = ctx.commerce.currency_code
    order_value = product.base_price * args.quantity
    quote = ctx.commerce.shipping_cost_for_usd(order_value, product.shipping_days)
    info = ctx.commerce.shipping_info()
    methods = ctx.commerce.payment_methods()

    print(f"{product.name}")
    print(f"  country/currency : {ctx.commerce.country} / {code}")
    print(f"  order value      : {ctx.resolver.format_usd(order_value, code)}")
    print(f"  shipping         : {'FREE' if quote.is_free else ctx.resolver.format(quote.cost, code)}  (~{quote.estimated_days} days)")
    print(f"  free shipping at : {ctx.resolver.format(info.free_shipping_threshold, code)} ({info.delivery_time})")
    print(f"  cash on delivery : {'yes' if ctx.commerce.cod_eligible() else 'no'}")
    print(f"  payment methods  : {', '.join(m.name for m in methods) or '(none)'}")
    return 0


def cmd_sync(ctx: StorefrontContext, args) -> int:
    try:
        products = asyncio.run(ctx.sync.refresh())
    except CatalogApiError as exc:
        print(f"Sync failed: {exc}", file=sys.stderr)
        return 1
    print(f"Catalog now has {len(products)} products")
    return 0


def cmd_reset(ctx: StorefrontContext, args) -> int:
    ctx.catalog.reset()
    print(f"Catalog reset to {len(ctx.catalog)} default products")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="FanKick catalog cache admin")
    parser.add_argument("--currency", help="Select and persist a display currency (e.g. INR)")
    parser.add_argument("--country", help="Select and persist the shipping country (e.g. IN)")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List products")
    p_list.add_argument("--category")
    p_list.add_argument("--subcategory")
    p_list.add_argument("--trending", action="store_true")
    p_list.add_argument("--limit", type=int, default=8)
    p_list.set_defaults(func=cmd_list)

    p_search = sub.add_parser("search", help="Search name, description and tags")
    p_search.add_argument("query")
    p_search.set_defaults(func=cmd_search)

    p_checkout = sub.add_parser("checkout", help="Show shipping and payment options for a product")
    p_checkout.add_argument("product_id")
    p_checkout.add_argument("--quantity", type=int, default=1)
    p_checkout.set_defaults(func=cmd_checkout)

    sub.add_parser("sync", help="Pull the catalog from the backend").set_defaults(func=cmd_sync)
    sub.add_parser("reset", help="Reset the catalog to bundled defaults").set_defaults(func=cmd_reset)

    args = parser.parse_args()
    setup_logging(args.verbose)

    ctx = build_context()
    if args.currency and not ctx.commerce.set_currency(args.currency.upper()):
        print(f"Unsupported currency: {args.currency} (choose from {', '.join(ctx.currencies.codes)})", file=sys.stderr)
        return 2
    if args.country:
        ctx.commerce.set_country(args.country)

    return args.func(ctx, args)


if __name__ == "__main__":
    sys.exit(main())
