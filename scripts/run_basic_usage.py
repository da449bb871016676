#!/usr/bin/env python3
"""
Exercise the Zoho Books client from the terminal:
- print the consent URL (auth-url)
- exchange an authorization code for tokens (exchange)
- list contacts / invoices with optional search (contacts, invoices)
- download an invoice PDF (invoice-pdf)

Credentials come from ZOHO_* env vars (or a local .env).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from zoho_books import ListFilters, SearchCriterion, ZohoBooksError, ZohoBooksSDK


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def _filters(args: argparse.Namespace) -> ListFilters:
    criteria = []
    if args.name_contains:
        criteria.append(SearchCriterion(search_text=args.name_contains, search_operator="contains"))
    return ListFilters(page=args.page, per_page=args.per_page, search_criteria=criteria)


async def run(args: argparse.Namespace) -> int:
    sdk = ZohoBooksSDK.from_env()

    if args.command == "auth-url":
        print(sdk.get_auth_url())
        return 0

    if args.command == "exchange":
        tokens = await sdk.exchange_code_for_token(args.code)
        print("Access token expires in", tokens.expires_in, "seconds")
        print("Store these in your .env:")
        print(f"ZOHO_ACCESS_TOKEN={tokens.access_token}")
        if tokens.refresh_token:
            print(f"ZOHO_REFRESH_TOKEN={tokens.refresh_token}")
        return 0

    if args.refresh:
        await sdk.refresh_access_token()

    if args.command == "contacts":
        page = await sdk.contacts.list(_filters(args))
        for contact in page.items:
            print(f"{contact.contact_id}\t{contact.contact_name}\t{contact.email or ''}")
        print(f"has_more_page={page.has_more_page}")
    elif args.command == "invoices":
        page = await sdk.invoices.list(_filters(args))
        for invoice in page.items:
            print(f"{invoice.invoice_id}\t{invoice.invoice_number}\t{invoice.status}\t{invoice.total}")
        print(f"has_more_page={page.has_more_page}")
    elif args.command == "invoice-pdf":
        content = await sdk.invoices.get_pdf(args.invoice_id)
        out = Path(args.output or f"invoice_{args.invoice_id}.pdf")
        out.write_bytes(content)
        print(f"Wrote {len(content)} bytes to {out}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Zoho Books client demo")
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument("--refresh", action="store_true", help="Refresh the access token before calling the API")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("auth-url", help="Print the OAuth consent URL")

    exchange = sub.add_parser("exchange", help="Exchange an authorization code for tokens")
    exchange.add_argument("code")

    for name in ("contacts", "invoices"):
        p = sub.add_parser(name, help=f"List {name}")
        p.add_argument("--page", type=int, default=None)
        p.add_argument("--per-page", type=int, default=None)
        p.add_argument("--name-contains", default=None)

    pdf = sub.add_parser("invoice-pdf", help="Download an invoice PDF")
    pdf.add_argument("invoice_id")
    pdf.add_argument("--output", "-o", default=None)

    args = parser.parse_args()
    setup_logging(args.verbose)

    try:
        return asyncio.run(run(args))
    except ZohoBooksError as exc:
        print(json.dumps(exc.to_dict(), indent=2, default=str), file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
