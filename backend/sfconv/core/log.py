import logging

_LOGGER_CONFIGURED = False


def setup_logging(level: int | str = logging.INFO) -> None:
    """Console logging for the service. Library modules only create loggers, never handlers."""
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger('sfconv')
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)

    _LOGGER_CONFIGURED = True
