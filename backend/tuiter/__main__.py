"""
Tuiter Backend — Server Entry Point
=====================================

Usage:
    python -m tuiter        (or the `tuiter` console script)

Binds to HOST:PORT from the environment; PORT falls back to 4000.
"""

import uvicorn

from tuiter.config import get_settings


def main() -> None:
    """Start uvicorn serving tuiter.main:app."""
    settings = get_settings()
    uvicorn.run(
        "tuiter.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
