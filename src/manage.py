"""Critique database management CLI.

Creates and drops the SQL tables of every bounded context.

Usage:
    python src/manage.py setup-db                      # Create all tables
    python src/manage.py drop-db                       # Drop all tables
    python src/manage.py setup-db --domain identity    # One context only
"""

import argparse
import sys

from server import DOMAIN_NAMES, get_domain
from shared.db import drop_db, setup_db


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    for name in domains or DOMAIN_NAMES:
        print(f"Initializing {name} domain...")
        domain = get_domain(name)
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    for name in domains or DOMAIN_NAMES:
        print(f"Initializing {name} domain...")
        domain = get_domain(name)
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Critique database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
