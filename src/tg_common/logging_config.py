"""Root logging setup for the bridge host process."""

import logging

from config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    if not settings.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
