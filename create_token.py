#!/usr/bin/env python3
"""
Mint an access token for the GymChain API.

Tokens are signed with ``SECRET_KEY``; run this with the same
environment as the server.

Usage:
    python create_token.py --sub front-desk --scope read --authority ROLE_SEARCH_USER
    python create_token.py --sub maria@gymchain.com --user-id 3 --days 30

Without ``--authority`` every authority is granted; without ``--scope``
both ``read`` and ``write`` are.
"""

import argparse

from gymchain_api.app.core.security import (
    ALL_AUTHORITIES,
    SCOPE_READ,
    SCOPE_WRITE,
    create_access_token,
)


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a GymChain API access token.")
    ap.add_argument("--sub", required=True, help="Token subject (client or account email)")
    ap.add_argument(
        "--authority",
        action="append",
        choices=ALL_AUTHORITIES,
        help="Authority to grant; repeat for several (default: all)",
    )
    ap.add_argument(
        "--scope",
        action="append",
        choices=[SCOPE_READ, SCOPE_WRITE],
        help="Scope to grant; repeat for several (default: read and write)",
    )
    ap.add_argument("--user-id", type=int, help="Bind the token to an account id")
    ap.add_argument("--days", type=int, default=365, help="Lifetime in days (default: 365)")
    args = ap.parse_args()

    claims = {
        "sub": args.sub,
        "authorities": args.authority or list(ALL_AUTHORITIES),
        "scope": args.scope or [SCOPE_READ, SCOPE_WRITE],
    }
    if args.user_id is not None:
        claims["user_id"] = args.user_id
    print(create_access_token(claims, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
