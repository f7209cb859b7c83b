"""Process-wide logging setup for runtime entrypoints."""

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def config_configure_logging(log_level: str) -> None:
    """Configure root logging once for the running process.

    Args:
        log_level: Validated logging level name from settings, such as `INFO`.

    Returns:
        None: Logging handlers are configured as a side effect.
    """

    logging.basicConfig(level=log_level, format=_LOG_FORMAT)
    logging.getLogger().setLevel(log_level)
