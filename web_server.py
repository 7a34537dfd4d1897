"""Web server entry point for the Lime Tools console"""

import sys

import uvicorn

from console.main import create_app
from limetools.utils.config import load_settings
from limetools.utils.exceptions import ConfigError
from limetools.utils.logger import get_logger, setup_logging


def main() -> None:
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(
        level=settings.logging.level,
        fmt=settings.logging.format,
        file_path=settings.logging.file_path,
        max_bytes=settings.logging.max_bytes,
        backup_count=settings.logging.backup_count,
    )
    logger = get_logger(__name__)

    app = create_app(settings)

    logger.info("Starting server", url=f"http://localhost:{settings.port}", host=settings.host)
    try:
        # Sessions live in process memory, so a single worker is required
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_config=None,
        )
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()
