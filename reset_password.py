#!/usr/bin/env python3
"""
Reset a user's password in the Article Portal MongoDB database.

This script DOES NOT read or reveal any existing passwords.  It sets
the stored digest (MD5 hex, the format the API writes) for every user
document with the given email.

Usage:
    python reset_password.py --email ada@example.com --password "NewPass!234"
    python reset_password.py --url mongodb://db:27017/article_portal --email ada@example.com

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import sys

from pymongo import MongoClient

from article_portal_api.app.core.config import settings
from article_portal_api.app.core.db import DEFAULT_DB_NAME, USERS_COLLECTION
from article_portal_api.app.core.security import hash_password


def reset_password(collection, email: str, password: str) -> int:
    """Store ``md5(password)`` for every user with ``email``.

    Returns the number of matched user documents.
    """
    result = collection.update_many(
        {"email": email},
        {"$set": {"password": hash_password(password)}},
    )
    return result.matched_count


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Reset an Article Portal user password (MongoDB).")
    ap.add_argument("--url", default=settings.mongo_url, help="MongoDB connection string (default: MONGO_URL)")
    ap.add_argument("--db", default=settings.mongo_db_name, help="Database name (default: from the URL)")
    ap.add_argument("--email", required=True, help="User email to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args(argv)

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    client = MongoClient(args.url, serverSelectionTimeoutMS=settings.mongo_timeout_ms)
    try:
        if args.db:
            database = client[args.db]
        else:
            database = client.get_default_database(default=DEFAULT_DB_NAME)
        matched = reset_password(database[USERS_COLLECTION], args.email, new_password)
        if not matched:
            print(f"[!] No user found with email: {args.email}", file=sys.stderr)
            return 2
        print(f"[+] Password updated for {matched} user(s) with email: {args.email}")
        return 0
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
