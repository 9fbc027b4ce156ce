"""
FastAPI Application Entry Point.

Run with: uvicorn pomorise.api.main:app --reload
"""
from pathlib import Path

from pomorise.api.app import create_app
from pomorise.core.config import get_settings
from pomorise.core.logging_config import setup_logging


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, Path(settings.log_dir) if settings.log_dir else None)

app = create_app(settings)


def run() -> None:
    import uvicorn

    uvicorn.run(
        "pomorise.api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development()
    )


if __name__ == "__main__":
    run()
