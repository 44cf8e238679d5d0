#!/usr/bin/env python3
"""Quick script to issue an access token for a user id (local testing)."""
import sys
from datetime import timedelta

if len(sys.argv) not in (2, 3):
    print("Usage: python create_token.py <user_id> [days]")
    print()
    print("Example:")
    print("  python create_token.py 1 30")
    sys.exit(1)

try:
    user_id = int(sys.argv[1])
    days = int(sys.argv[2]) if len(sys.argv) == 3 else 7
except ValueError:
    print("Error: user_id and days must be integers")
    sys.exit(1)

from app.core.security import create_user_token  # noqa: E402

token = create_user_token(user_id, expires_delta=timedelta(days=days))

print("Send this header with your requests:")
print("-" * 80)
print(f"Authorization: Bearer {token}")
print("-" * 80)
