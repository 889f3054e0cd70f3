#!/usr/bin/env python3
"""
Reset a user's password in the GymChain SQLite database.

This script does not read or reveal any existing password.  It stores a
new PBKDF2 hash for the account with the given email.

Usage:
    python reset_password.py --email maria@gymchain.com --password "NewStrongPass!234"
    python reset_password.py --db /srv/gymchain/gymchain.db --email maria@gymchain.com

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import os
import sys
from dataclasses import replace

from gymchain_api.app.core.config import settings
from gymchain_api.app.core.db import get_database_path
from gymchain_api.app.core.security import hash_password
from gymchain_api.app.repositories.user_repository import SQLiteUserStore


def main() -> None:
    ap = argparse.ArgumentParser(description="Reset a GymChain user password (SQLite).")
    ap.add_argument("--db", help="Path to the SQLite DB file (default: DATABASE_URL)")
    ap.add_argument("--email", required=True, help="Email of the user to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args()

    if args.db:
        settings.database_url = os.path.abspath(args.db)
    db_path = get_database_path()
    if not os.path.exists(db_path):
        print(f"[!] DB not found: {db_path}", file=sys.stderr)
        sys.exit(1)

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)

    store = SQLiteUserStore()
    user = store.find_by_email(args.email)
    if user is None:
        print(f"[!] No user found with email: {args.email}", file=sys.stderr)
        sys.exit(2)
    store.save(replace(user, password=hash_password(new_password)))
    print(f"[+] Password updated for user: {args.email}")


if __name__ == "__main__":
    main()
