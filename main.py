"""
Main entrypoint: NeroGuard FastAPI server.

Initialises the history store, then serves the API with uvicorn in the
main thread. On SIGINT/SIGTERM the server shuts down and the process exits.

Env: API_HOST, API_PORT, NEROGUARD_DB_URL / HISTORY_DB_PATH, HISTORY_LIMIT, LOG_LEVEL, etc.

Equivalent: uvicorn backend_neroguard.api_server.app:app --host 0.0.0.0 --port 8000
"""

import os

# Configure structured JSON logging before other imports that may log
from backend_neroguard.neroguard_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Run the FastAPI server in the main thread."""
    from backend_neroguard.config import get_settings
    from backend_neroguard.api_server.app import app
    import uvicorn

    settings = get_settings()
    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        history_limit=settings.history_limit,
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=os.getenv("LOG_LEVEL", "info").lower())


if __name__ == "__main__":
    main()
