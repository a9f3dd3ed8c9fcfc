# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Registration and login orchestration.

Both operations return an AuthResult instead of raising; the taxonomy
exceptions in credauth.errors are used internally and converted here, and any
other exception is logged and reported as an internal error.

Login failures for an unknown user and for a wrong password carry the same
kind and message. Only the server log tells them apart.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from credauth.auth.passwords import dummy_verify, hash_password, verify_password
from credauth.auth.store import AccountSummary, CredentialStore
from credauth.core.messages import MSG_AUTHENTICATED, MSG_REGISTERED, message_for
from credauth.errors import (
    AuthError,
    AuthenticationError,
    DuplicateUserError,
    InternalError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ResultKind(str, Enum):
    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    DUPLICATE_USER = "duplicate_user"
    AUTHENTICATION_ERROR = "authentication_error"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class AuthResult:
    kind: ResultKind
    message: str
    account: Optional[AccountSummary] = None

    @property
    def success(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    @classmethod
    def ok(cls, message: str, account: AccountSummary) -> "AuthResult":
        return cls(kind=ResultKind.SUCCESS, message=message, account=account)

    @classmethod
    def failure(cls, kind: str) -> "AuthResult":
        return cls(kind=ResultKind(kind), message=message_for(kind))


def _require(username: object, password: object) -> Tuple[str, str]:
    # no trimming or case folding: usernames are matched exactly
    if not isinstance(username, str) or not isinstance(password, str) or not username or not password:
        raise ValidationError("username/password requeridos")
    return username, password


class AuthService:
    def __init__(
        self,
        store: CredentialStore,
        *,
        hash_fn: Callable[[str], str] = hash_password,
        verify_fn: Callable[[str, str], bool] = verify_password,
    ) -> None:
        self.store = store
        self._hash = hash_fn
        self._verify = verify_fn

    def register(self, username: object, password: object) -> AuthResult:
        return self._guard("registro", self._register, username, password)

    def login(self, username: object, password: object) -> AuthResult:
        return self._guard("login", self._login, username, password)

    def list_accounts(self) -> Tuple[AccountSummary, ...]:
        return self.store.list_all()

    def _guard(self, op: str, fn, username: object, password: object) -> AuthResult:
        try:
            return fn(username, password)
        except AuthError as e:
            return AuthResult.failure(e.kind)
        except Exception:
            logger.exception("Error en el %s", op)
            return AuthResult.failure(InternalError.kind)

    def _register(self, username: object, password: object) -> AuthResult:
        username, password = _require(username, password)

        # Fast path: skip the expensive hash when the name is obviously taken.
        if self.store.find_by_username(username) is not None:
            logger.info("[REGISTRO] Usuario '%s' ya existe", username)
            raise DuplicateUserError(username)

        password_hash = self._hash(password)
        account = self.store.create_if_absent(username, password_hash)
        if account is None:
            logger.info("[REGISTRO] Usuario '%s' registrado en paralelo", username)
            raise DuplicateUserError(username)

        logger.info("[REGISTRO] Usuario '%s' registrado exitosamente", username)
        return AuthResult.ok(MSG_REGISTERED, account.summary())

    def _login(self, username: object, password: object) -> AuthResult:
        username, password = _require(username, password)

        account = self.store.find_by_username(username)
        if account is None:
            # keep timing close to the wrong-password path
            dummy_verify(password)
            logger.info("[LOGIN] Intento fallido - Usuario '%s' no encontrado", username)
            raise AuthenticationError()

        if not self._verify(account.password_hash, password):
            logger.info("[LOGIN] Intento fallido - Contraseña incorrecta para '%s'", username)
            raise AuthenticationError()

        logger.info("[LOGIN] Usuario '%s' autenticado exitosamente", username)
        return AuthResult.ok(MSG_AUTHENTICATED, account.summary())
