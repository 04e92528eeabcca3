#!/usr/bin/env python3
"""
Add organizations to the charity API's storage from the command line.

Two targets are supported:

* ``file`` appends an orphanage or old age home to the JSON document,
  assigning the next id exactly as ``POST /api/organization/{type}`` does.
* ``store`` inserts a row into the SQLite store served by
  ``GET /api/store/organizations``.

Usage:
    python seed_organizations.py file --type orphanage --name "Hope Home" --amount "₹25,000"
    python seed_organizations.py store --name "Hope Home" --amount 25000 --db ./charity.db

``--data-file`` and ``--db`` override ``DATA_FILE`` and ``DATABASE_URL``;
relative paths given on the command line are taken from the current
directory.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from charity_api.app.core.config import settings
from charity_api.app.core.db import init_db
from charity_api.app.schemas.organization import OrganizationCreate, OrganizationType
from charity_api.app.services.organization_service import OrganizationService, PersistenceError
from charity_api.app.services.store_service import StoreOrganizationService


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Add an organization to the charity API storage.")
    sub = ap.add_subparsers(dest="target", required=True)

    file_ap = sub.add_parser("file", help="Append to the JSON organizations document")
    file_ap.add_argument("--type", required=True, choices=[t.value for t in OrganizationType], help="Organization category")
    file_ap.add_argument("--name", required=True, help="Organization name")
    file_ap.add_argument("--amount", required=True, help='Funding amount as display text, e.g. "₹25,000"')
    file_ap.add_argument("--location", help="Optional location")
    file_ap.add_argument("--data-file", help="Path to the JSON document (defaults to DATA_FILE)")

    store_ap = sub.add_parser("store", help="Insert into the SQLite organization store")
    store_ap.add_argument("--name", required=True, help="Organization name")
    store_ap.add_argument("--amount", required=True, type=float, help="Numeric funding amount")
    store_ap.add_argument("--db", help="Path to the SQLite DB file (defaults to DATABASE_URL)")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.target == "file":
        if args.data_file:
            settings.data_file = str(Path(args.data_file).resolve())
        data = OrganizationCreate(org_name=args.name, fund_amount=args.amount, location=args.location)
        try:
            org = asyncio.run(OrganizationService.create_organization(args.type, data))
        except PersistenceError as e:
            print(f"[!] {e}", file=sys.stderr)
            return 1
        print(f"[+] Added {args.type} #{org['id']}: {org['org_name']} ({org['fund_amount']})")
        return 0

    if args.db:
        settings.database_url = str(Path(args.db).resolve())
    init_db()
    org = asyncio.run(StoreOrganizationService.add_organization(args.name, args.amount))
    print(f"[+] Added store organization #{org.id}: {org.org_name} ({org.fund_amount:g})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
