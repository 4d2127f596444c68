"""Run the Sample App server.

Usage:
    python -m sample_app

Host, port and log level come from settings (BACKEND_HOST, BACKEND_PORT, LOG_LEVEL).
"""

import uvicorn

from sample_app.config import settings


def main() -> None:
    uvicorn.run(
        "sample_app.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
