# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations


class AuthError(Exception):
    """Base class for the authentication error taxonomy."""

    kind = "internal_error"


class ValidationError(AuthError):
    """Missing or empty username/password."""

    kind = "validation_error"


class DuplicateUserError(AuthError):
    """Username already registered."""

    kind = "duplicate_user"


class AuthenticationError(AuthError):
    """Unknown user or wrong password (deliberately indistinguishable)."""

    kind = "authentication_error"


class InternalError(AuthError):
    """Unexpected fault; details stay in the server log."""

    kind = "internal_error"
