# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Volatile credential store.

Accounts live only for the lifetime of the process. The store is the single
owner of Account records; callers receive frozen values, and listings are built
from AccountSummary so the password hash never leaves through them.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountSummary:
    id: int
    username: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class Account:
    id: int
    username: str
    password_hash: str
    created_at: datetime

    def summary(self) -> AccountSummary:
        return AccountSummary(id=self.id, username=self.username, created_at=self.created_at)

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, username={self.username!r}, created_at={self.created_at!r})"


class CredentialStore:
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._accounts: List[Account] = []
        self._by_username: Dict[str, Account] = {}
        self._ids = itertools.count(1)
        logger.debug("Almacenamiento en memoria inicializado")

    def create(self, username: str, password_hash: str) -> Account:
        """Append a new account. Uniqueness is the caller's concern."""
        with self._lock:
            account = Account(
                id=next(self._ids),
                username=username,
                password_hash=password_hash,
                created_at=datetime.now(timezone.utc),
            )
            self._accounts.append(account)
            # first account wins lookups, as with a linear scan
            self._by_username.setdefault(username, account)
        logger.info("Cuenta creada con id %s", account.id)
        return account

    def create_if_absent(self, username: str, password_hash: str) -> Optional[Account]:
        """Atomic find-then-create; None when the username is already taken."""
        with self._lock:
            if username in self._by_username:
                return None
            return self.create(username, password_hash)

    def find_by_username(self, username: str) -> Optional[Account]:
        with self._lock:
            return self._by_username.get(username)

    def list_all(self) -> Tuple[AccountSummary, ...]:
        with self._lock:
            return tuple(a.summary() for a in self._accounts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
