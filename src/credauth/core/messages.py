# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""User-facing messages and their HTTP status codes.

Centralising this keeps the service and the HTTP layer from drifting apart on
wording, which matters for the uniform authentication failure.
"""

from __future__ import annotations

from typing import Dict

MSG_REGISTERED = "Usuario registrado exitosamente"
MSG_AUTHENTICATED = "Autenticación satisfactoria"
MSG_REQUIRED = "Usuario y contraseña son requeridos"
MSG_DUPLICATE = "El usuario ya existe"
MSG_AUTH_FAILED = "Error en la autenticación"
MSG_INTERNAL = "Error interno del servidor"
MSG_NOT_FOUND = "Ruta no encontrada"


# --- Result kind -> (message, HTTP status) for failures ---
FAILURES: Dict[str, Dict[str, object]] = {
    "validation_error": {"message": MSG_REQUIRED, "status": 400},
    "duplicate_user": {"message": MSG_DUPLICATE, "status": 400},
    "authentication_error": {"message": MSG_AUTH_FAILED, "status": 401},
    "internal_error": {"message": MSG_INTERNAL, "status": 500},
}


def message_for(kind: str) -> str:
    return str(FAILURES.get(kind, FAILURES["internal_error"])["message"])


def status_for(kind: str, *, success_status: int = 200) -> int:
    """Return the HTTP status for a result kind ('success' uses success_status)."""
    if kind == "success":
        return success_status
    return int(FAILURES.get(kind, FAILURES["internal_error"])["status"])
