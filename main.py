# main.py
import os
from nicegui import ui
from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

import logging
import sys


# -------------------
# Logging setup
# -------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "info").upper()

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s [%(levelname)s] %(threadName)s: %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

# pages register themselves on import
import ui.navigation as navigation  # noqa: E402,F401


# -------------------
# FastAPI app (single ASGI root)
# -------------------
app = FastAPI()

# -------------------
# Reverse proxy prefix (HTTP only)
# -------------------
class ProxyPrefixMiddleware(BaseHTTPMiddleware):
    """Serve under a sub-path when a reverse proxy sends X-Forwarded-Prefix."""

    async def dispatch(self, request: Request, call_next):
        prefix = request.headers.get("X-Forwarded-Prefix")
        if prefix:
            request.scope["root_path"] = prefix.rstrip("/")
        return await call_next(request)

app.add_middleware(ProxyPrefixMiddleware)

# -------------------
# Attach NiceGUI to FastAPI
# -------------------
ui.run_with(
    app,
    title="Sentinel",
    storage_secret=os.getenv("SENTINEL_STORAGE_SECRET", "sentinel-secret"),
)
logger.info("Sentinel UI mounted")

# -------------------
# Uvicorn entrypoint
# -------------------
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=int(os.getenv("SENTINEL_PORT", "5002")),
        reload=False,
    )
