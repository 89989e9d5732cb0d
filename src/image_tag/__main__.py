"""Entry point for running the image tag service.

Usage:
    python -m image_tag
"""

import uvicorn

from .config import LoggingSettings, get_settings
from .logging_config import configure_logging


def main() -> None:
    """Run the HTTP server."""
    # Logging first, so warnings raised while loading settings use its format
    logging_settings = LoggingSettings()
    configure_logging(logging_settings.log_level, logging_settings.log_format)
    settings = get_settings()

    uvicorn.run(
        "image_tag.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.keep_alive_timeout,
        log_config=None,
    )


if __name__ == "__main__":
    main()
