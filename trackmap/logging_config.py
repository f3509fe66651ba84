import logging

COLORS = {
    "DEBUG": "\033[90m",     # Light Gray
    "INFO": "\033[0m",       # Default
    "WARNING": "\033[33m",   # Orange
    "ERROR": "\033[31m",     # Red
    "CRITICAL": "\033[95m",  # Magenta
    "RESET": "\033[0m",
}

LOG_FORMAT = "%(levelname)s: %(message)s"


class ColorFormatter(logging.Formatter):
    def format(self, record):
        log_color = COLORS.get(record.levelname, COLORS["RESET"])
        log_message = super().format(record)
        return f"{log_color}{log_message}{COLORS['RESET']}"


logger = logging.getLogger("trackmap")

# Streamlit re-executes the page script on every interaction; only attach once
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ColorFormatter(LOG_FORMAT))
    logger.addHandler(console_handler)
    logger.setLevel(logging.INFO)


def get_logger(name):
    """Return a child of the package logger, e.g. ``trackmap.reprojection``."""
    if name == logger.name or name.startswith(logger.name + "."):
        return logging.getLogger(name)
    return logger.getChild(name)


__all__ = ["logger", "get_logger"]
