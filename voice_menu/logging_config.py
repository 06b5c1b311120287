"""
Logging configuration for the voice menu normalizer.

Usage:
    from voice_menu.logging_config import setup_logging
    setup_logging()  # Call once at startup

Environment variables:
    LOG_LEVEL: Set to DEBUG, INFO, WARNING, ERROR, or CRITICAL (default: INFO)
    LOG_CALLER_SPEECH: Set to false to keep transcript text and spoken item
        names out of the logs (default: true)

What gets logged where:
    voice_menu.menu.catalog                 INFO   catalog loaded (count, path)
    voice_menu.menu.dictionary              DEBUG  live items with no catalog entry
    voice_menu.voice.normalize_transcript   DEBUG  each accepted match, quoting the transcript
    voice_menu.voice.order_items            INFO   each renamed order line, quoting the spoken name
    voice_menu.voice.pronunciation          INFO   lexicon entry counts
"""
import logging
import os
import sys

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Loggers whose messages quote what the caller said.
CALLER_SPEECH_LOGGERS = (
    "voice_menu.voice.normalize_transcript",
    "voice_menu.voice.order_items",
)


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def setup_logging(level: str = None, log_caller_speech: bool = None) -> None:
    """
    Configure logging for the normalizer.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If not provided, reads from LOG_LEVEL env var, defaults to INFO.
        log_caller_speech: When False, the loggers in CALLER_SPEECH_LOGGERS
               only pass WARNING and above, which none of their speech-quoting
               messages use. If not provided, reads LOG_CALLER_SPEECH.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    level = level.upper()
    if level not in VALID_LEVELS:
        level = "INFO"

    numeric_level = getattr(logging, level)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    logging.getLogger("voice_menu").setLevel(numeric_level)

    if log_caller_speech is None:
        log_caller_speech = _env_flag("LOG_CALLER_SPEECH", True)
    # NOTSET defers to the voice_menu level set above
    speech_level = logging.NOTSET if log_caller_speech else logging.WARNING
    for name in CALLER_SPEECH_LOGGERS:
        logging.getLogger(name).setLevel(speech_level)

    logger = logging.getLogger(__name__)
    logger.debug(
        "Logging configured at %s level (caller speech %s)",
        level, "logged" if log_caller_speech else "suppressed",
    )
