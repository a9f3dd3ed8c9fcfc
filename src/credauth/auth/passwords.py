# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import os
from typing import Optional

from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError

_PH = PasswordHasher(
    time_cost=int(os.getenv("AUTH_HASH_TIME_COST", "3")),
    memory_cost=int(os.getenv("AUTH_HASH_MEMORY_COST", "65536")),
    parallelism=int(os.getenv("AUTH_HASH_PARALLELISM", "4")),
)

_DUMMY_HASH: Optional[str] = None


def hash_password(plain: str) -> str:
    if not plain:
        raise ValueError("Password vacío")
    return _PH.hash(plain)


def verify_password(hash_value: str, plain: str) -> bool:
    """Check plain against an encoded argon2 hash.

    Only a mismatch yields False; a malformed stored hash raises, since that is a
    fault in the store rather than a bad credential.
    """
    if not hash_value or not plain:
        return False
    try:
        return _PH.verify(hash_value, plain)
    except VerifyMismatchError:
        return False


def dummy_verify(plain: str) -> None:
    """Spend one verification on a throwaway hash (unknown-user login path)."""
    global _DUMMY_HASH
    if _DUMMY_HASH is None:
        _DUMMY_HASH = _PH.hash("credauth.dummy")
    verify_password(_DUMMY_HASH, plain or "-")
