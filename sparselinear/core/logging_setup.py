"""Process-wide logging setup for scripts."""

import logging
from typing import Optional

from sparselinear.core.config import Config

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: Optional[Config] = None) -> None:
    """Configure the root logger from the `logging` config section."""
    section = config.get_section("logging") if config is not None else {}
    level = str(section.get("level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=section.get("format", DEFAULT_FORMAT),
    )
