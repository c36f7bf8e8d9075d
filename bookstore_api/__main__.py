"""Runs the API with uvicorn on HOST:PORT from the environment."""

import uvicorn

from bookstore_api.config import get_settings
from bookstore_api.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
