#!/usr/bin/env python3
"""
Script to issue an access token for local development.
Production tokens come from the identity provider; this one is signed
with JWT_SECRET_KEY so the API accepts it.
"""

import uuid
from datetime import timedelta

from app.auth.jwt_handler import create_access_token


def issue_dev_token(user_id: uuid.UUID, expires_minutes: int = None) -> str:
    """Sign a token whose subject is user_id"""
    expires_delta = timedelta(minutes=expires_minutes) if expires_minutes else None
    return create_access_token(data={"sub": str(user_id)}, expires_delta=expires_delta)


def create_dev_token():
    raw_user_id = input("Enter user id (leave empty to generate one): ").strip()

    try:
        user_id = uuid.UUID(raw_user_id) if raw_user_id else uuid.uuid4()
    except ValueError:
        print(f"❌ '{raw_user_id}' is not a valid UUID")
        return

    token = issue_dev_token(user_id)

    print(f"✅ Token issued!")
    print(f"User ID: {user_id}")
    print(f"Authorization: Bearer {token}")


if __name__ == "__main__":
    create_dev_token()
