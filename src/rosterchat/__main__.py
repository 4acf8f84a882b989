"""Start the chat server with uvicorn (python -m rosterchat)."""

import uvicorn

from rosterchat.config import get_settings


def main():
    """Start the Socket.IO-wrapped FastAPI application with uvicorn."""
    settings = get_settings()

    uvicorn.run(
        "rosterchat.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
