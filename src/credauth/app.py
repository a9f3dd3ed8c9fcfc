# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from credauth.auth.service import AuthResult, AuthService
from credauth.auth.store import CredentialStore
from credauth.core.logger import setup_logger
from credauth.core.messages import MSG_INTERNAL, MSG_NOT_FOUND, status_for

logger = logging.getLogger(__name__)

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "y"}


def _body(success: bool, message: str) -> Dict[str, Any]:
    return {"success": success, "message": message}


async def _read_credentials(request: Request) -> Dict[str, Any]:
    """Return the request fields; unparseable bodies count as empty."""
    ctype = (request.headers.get("content-type") or "").lower()
    try:
        if ctype.startswith(FORM_TYPES):
            form = await request.form()
            return dict(form)
        raw = await request.body()
        data = json.loads(raw) if raw else {}
    except (ValueError, StarletteHTTPException) as e:
        logger.debug("Cuerpo de petición no válido: %s", type(e).__name__)
        return {}
    return data if isinstance(data, dict) else {}


def _respond(result: AuthResult, *, success_status: int) -> JSONResponse:
    return JSONResponse(
        _body(result.success, result.message),
        status_code=status_for(result.kind.value, success_status=success_status),
    )


def create_app(service: Optional[AuthService] = None, *, expose_users: Optional[bool] = None) -> FastAPI:
    """Build the HTTP app around one AuthService (a fresh store when none is given)."""
    setup_logger()
    if service is None:
        service = AuthService(CredentialStore())
    if expose_users is None:
        expose_users = _truthy(os.getenv("AUTH_EXPOSE_USERS"))

    app = FastAPI(title="credauth")
    app.state.auth_service = service

    @app.middleware("http")
    async def _access_log(request: Request, call_next):
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return JSONResponse(_body(False, MSG_NOT_FOUND), status_code=404)
        if exc.status_code >= 500:
            return JSONResponse(_body(False, MSG_INTERNAL), status_code=exc.status_code)
        return JSONResponse(_body(False, str(exc.detail)), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Error del servidor en %s", request.url.path, exc_info=exc)
        return JSONResponse(_body(False, MSG_INTERNAL), status_code=500)

    @app.get("/")
    def index():
        return {
            "mensaje": "Bienvenido al Servicio Web de Autenticación",
            "descripcion": "API REST para registro e inicio de sesión de usuarios",
            "endpoints": {
                "registro": "POST /api/auth/register",
                "login": "POST /api/auth/login",
            },
        }

    @app.post("/api/auth/register")
    async def register(request: Request):
        data = await _read_credentials(request)
        result = await run_in_threadpool(service.register, data.get("username"), data.get("password"))
        return _respond(result, success_status=201)

    @app.post("/api/auth/login")
    async def login(request: Request):
        data = await _read_credentials(request)
        result = await run_in_threadpool(service.login, data.get("username"), data.get("password"))
        return _respond(result, success_status=200)

    if expose_users:

        @app.get("/api/auth/users")
        def list_users():
            return {"success": True, "users": [a.to_dict() for a in service.list_accounts()]}

    return app


app = create_app()
