import logging

from dockdash.config import Config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_log_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    return level


def configure_logging(config: Config) -> logging.Handler:
    """
    Sends log records to `config.log_file`. The terminal is owned by the dashboard so nothing is logged to stdout.

    :return: The installed file handler
    """
    handler = logging.FileHandler(config.log_file, mode="w")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(resolve_log_level(config.log_level))
    root.addHandler(handler)
    return handler
