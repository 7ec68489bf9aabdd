import logging
import re

from termcolor import colored

PREFIX = "📰 Newsdesk:"


class NewsdeskLogFormatter(logging.Formatter):
    """Console formatter: package prefix, a level marker below INFO, bold red from ERROR up."""

    def format(self, record):
        message = f"{PREFIX} {record.getMessage()}"
        if record.levelno < logging.INFO:
            message = f"({record.levelname}) {message}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if record.levelno >= logging.ERROR:
            return colored(message, "red", attrs=["bold"])
        return message


class NewsdeskLogFileFormatter(logging.Formatter):
    """Plain-text formatter for log files; colour codes are stripped from the rendered line."""

    ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

    def format(self, record):
        return self.ANSI_ESCAPE_PATTERN.sub("", super().format(record))
