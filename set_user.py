#!/usr/bin/env python3
"""
Write the user record file served by the Credential API.

The record file holds a single ``{"username": ..., "password": ...}``
object and is replaced as a whole.  With ``--hash`` the password is
stored as a PBKDF2‑HMAC‑SHA256 hash ("salthex$hashhex"); run the API
with ``PASSWORD_HASHING=true`` in that case.

Usage:
    python set_user.py --username admin --password secret
    python set_user.py --file /srv/user.json --username admin --hash

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import json
import sys

from credential_api.app.core.config import settings
from credential_api.app.core.security import hash_password
from credential_api.app.core.storage import resolve_user_data_path


def build_record(username: str, password: str, hashed: bool = False) -> dict:
    return {
        "username": username,
        "password": hash_password(password) if hashed else password,
    }


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Write the Credential API user record.")
    ap.add_argument(
        "--file",
        default=settings.user_data_path,
        help="Path to the user record (default: USER_DATA_PATH, relative to the project root)",
    )
    ap.add_argument("--username", required=True, help="Username to store")
    ap.add_argument("--password", help="Password to store. If omitted, you'll be prompted securely.")
    ap.add_argument("--hash", action="store_true", help="Store a PBKDF2 hash instead of plain text")
    args = ap.parse_args(argv)

    if not args.username:
        print("[!] Empty username is not allowed.", file=sys.stderr)
        return 1

    password = args.password or getpass.getpass("Enter password: ")
    if not password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    path = resolve_user_data_path(args.file)
    record = build_record(args.username, password, hashed=args.hash)
    try:
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(record, fh, indent=2)
            fh.write("\n")
    except OSError as e:
        print(f"[!] Cannot write {path}: {e}", file=sys.stderr)
        return 2

    print(f"[+] User record for {args.username} written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
