import logging
import sys
from colorlog import ColoredFormatter
import traceback
import json

LOGGER_NAME = "spring_deployer"


def setup_logger(debug_mode=False):
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # Create console handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # Create colored formatter
    formatter = ColoredFormatter(
        "%(log_color)s[%(levelname)s] %(message)s",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "red,bg_white",
        }
    )
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)
    else:
        for existing in logger.handlers:
            existing.setLevel(handler.level)

    return logger


def get_debug_mode():
    return DEBUG_MODE


def print_stack_trace():
    """
    Log the stack trace of the exception being handled, in debug mode only.
    """
    if get_debug_mode():
        error_msg = traceback.format_exc()
        logger.error(error_msg)


# Logger defaults to INFO unless reconfigured from a project config.
DEBUG_MODE = False
logger = setup_logger(debug_mode=DEBUG_MODE)


def configure_logger_from_file(config_path):
    """
    Switch to DEBUG logging when the project config has "mode": "DEBUG".

    Falls back to the current settings if the file cannot be read.
    """
    global DEBUG_MODE
    try:
        with open(config_path, encoding="utf-8") as f:
            config = json.load(f)
        DEBUG_MODE = str(config.get("mode", "")).upper() == "DEBUG"
        setup_logger(debug_mode=DEBUG_MODE)
        if DEBUG_MODE:
            logger.debug("Debug mode is active.")
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to configure logger from file: {e}. Using default settings.")
