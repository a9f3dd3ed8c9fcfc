"""credauth entrypoint.

Run with:
  python -m credauth
"""

import logging
import os

import uvicorn

from credauth.core.logger import setup_logger


def main() -> None:
    host = os.getenv("AUTH_HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    reload = os.getenv("AUTH_RELOAD", "false").lower() in {"1", "true", "yes", "y"}

    log = setup_logger()
    log.info("Servidor corriendo en: http://localhost:%s", port)
    log.info("Endpoints disponibles: POST /api/auth/register, POST /api/auth/login")
    uvicorn.run("credauth.app:app", host=host, port=port, reload=reload)

if __name__ == "__main__":
    main()
