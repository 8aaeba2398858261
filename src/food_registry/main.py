"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from food_registry.config import Settings


def main() -> None:
    """Serve the ASGI app on the configured host and port."""
    settings = Settings()
    uvicorn.run(
        "food_registry.api.asgi:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
