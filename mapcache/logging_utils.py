"""
Logging utilities for mapcache.

Logging is configured from the `[logging]` config section:

    [logging]
    level = "INFO"
    console = true
    format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file = "logs/mapcache.log"
    rotate = true

    [logging.logger."mapcache.cache"]
    level = "DEBUG"
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Emits a debug line per cache hit/miss
CACHE_LOGGER_NAME = "mapcache.cache"


def getLogLevelByStr(levelStr: str, default: Optional[int] = None) -> Optional[int]:
    """Get log level by string."""
    level = getattr(logging, levelStr.upper(), None)
    if not isinstance(level, int):
        logger.error(f"Invalid log level '{levelStr}'")
        return default
    return level


def _createFileHandler(logFile: str, rotate: bool) -> logging.Handler:
    Path(logFile).parent.mkdir(parents=True, exist_ok=True)
    if rotate:
        return TimedRotatingFileHandler(filename=logFile, when="midnight", backupCount=7, encoding="utf-8")
    return logging.FileHandler(logFile, encoding="utf-8")


def configureLogger(localLogger: logging.Logger, config: Dict[str, Any]) -> None:
    """Configure level and handlers of a single logger from its config section."""
    if "level" in config:
        logLevel = getLogLevelByStr(config["level"])
        if logLevel is not None:
            localLogger.setLevel(logLevel)

    formatter = logging.Formatter(config.get("format", DEFAULT_LOG_FORMAT))

    # Clear existing handlers to avoid duplicates on reconfiguration
    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)

    handlers = []
    if config.get("console", False):
        handlers.append(logging.StreamHandler())

    if "file" in config:
        try:
            handlers.append(_createFileHandler(config["file"], bool(config.get("rotate", False))))
        except OSError as e:
            logger.error(f"Failed to setup file logging for {localLogger.name}: {e}")

    for handler in handlers:
        handler.setFormatter(formatter)
        localLogger.addHandler(handler)

    if handlers:
        logger.info(
            f"Logging {localLogger.name} to {', '.join(type(h).__name__ for h in handlers)}, "
            f"logLevel: {logging.getLevelName(localLogger.getEffectiveLevel())}"
        )


def initLogging(config: Dict[str, Any]) -> None:
    """Configure root logger and per-logger overrides from the `[logging]` section."""
    rootLogger = logging.getLogger()
    rootLogger.setLevel(logging.INFO)
    configureLogger(rootLogger, config)

    # A DEBUG root level shouldn't flood the log with per-key cache lines,
    #  they need an explicit [logging.logger."mapcache.cache"] override
    if rootLogger.getEffectiveLevel() < logging.INFO:
        logging.getLogger(CACHE_LOGGER_NAME).setLevel(logging.INFO)

    for loggerName, loggerConfig in config.get("logger", {}).items():
        logger.debug(f"Configuring logger '{loggerName}' with config {loggerConfig}")
        configureLogger(logging.getLogger(loggerName), loggerConfig)

    logger.info(f"Logging configured: root level={logging.getLevelName(rootLogger.getEffectiveLevel())}")
