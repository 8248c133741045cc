#!/usr/bin/env python3
"""Create an admin account for the slideshow admin panel, or promote an existing user.

Talks to the database directly, so it works before the API is running.

Usage (from the repository root):
    python tools/create_admin.py --email admin@example.org
    python tools/create_admin.py --email admin@example.org --name "Site Admin" --password secret123
"""

import argparse
import getpass
import os
import sys
import uuid

import bcrypt
import psycopg
from dotenv import load_dotenv

load_dotenv()

MIN_PASSWORD_LENGTH = 8


def connect() -> psycopg.Connection:
    """Open a connection using the same DB_* variables as the service."""
    return psycopg.connect(
        host=os.getenv("DB_HOST", "localhost"),
        port=int(os.getenv("DB_PORT", "5432")),
        user=os.getenv("DB_USER", "postgres"),
        password=os.getenv("DB_PASSWORD", "postgres"),
        dbname=os.getenv("DB_NAME", "society_cms"),
    )


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def upsert_admin(email: str, name: str | None, password: str | None) -> str:
    """Promote the user with this email, or create it. Returns what happened."""
    with connect() as conn:
        with conn.cursor() as cur:
            cur.execute("SELECT id FROM users WHERE email = %s", (email,))
            row = cur.fetchone()

            if row:
                cur.execute(
                    "UPDATE users SET role = 'admin', is_active = TRUE, updated_at = now() "
                    "WHERE id = %s",
                    (row[0],),
                )
                if password:
                    cur.execute(
                        "UPDATE users SET hashed_password = %s WHERE id = %s",
                        (hash_password(password), row[0]),
                    )
                return "promoted"

            if not password:
                print("ERROR: a password is required to create a new account.")
                sys.exit(1)

            cur.execute(
                "INSERT INTO users (id, email, name, hashed_password, role, is_active) "
                "VALUES (%s, %s, %s, %s, 'admin', TRUE)",
                (uuid.uuid4(), email, name, hash_password(password)),
            )
            return "created"


def main():
    parser = argparse.ArgumentParser(
        description="Create or promote an admin user."
    )
    parser.add_argument("--email", "-e", required=True, help="Admin email address")
    parser.add_argument("--name", "-n", default=None, help="Display name")
    parser.add_argument(
        "--password", "-p", default=None, help="Password (prompted for when omitted)"
    )
    args = parser.parse_args()

    password = args.password
    if password is None:
        password = getpass.getpass("Password (leave empty to keep existing): ") or None

    if password is not None and len(password) < MIN_PASSWORD_LENGTH:
        print(f"ERROR: password must be at least {MIN_PASSWORD_LENGTH} characters.")
        sys.exit(1)

    print("Connecting to database...")
    outcome = upsert_admin(args.email.strip().lower(), args.name, password)
    print(f"Admin {args.email} {outcome}.")


if __name__ == "__main__":
    main()
