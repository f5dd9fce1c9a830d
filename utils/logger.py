from utils.pattern import Singleton
import logging
from datetime import datetime
import os

LEVELS = {
    "debug": logging.DEBUG,
    "info":  logging.INFO,
    "warn":  logging.WARN,
    "error": logging.ERROR,
    "fatal": logging.FATAL,
}

class ScreenFormatter(logging.Formatter):
    GREY = "\x1b[38;20m"
    BLUE = "\x1b[34;20m"
    YELLOW = "\x1b[33;20m"
    GREEN = "\x1b[32;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    _template = f"{GREEN}%(asctime)s{RESET} - ""{0}%(levelname)s"\
        f"{RESET} [%(module)s:%(lineno)d - %(funcName)s()] -> "\
        "{0}%(message)s"f"{RESET}"

    FORMATS = {
        logging.DEBUG: _template.format(GREY),
        logging.INFO: _template.format(BLUE),
        logging.WARNING: _template.format(YELLOW),
        logging.ERROR: _template.format(RED),
        logging.CRITICAL: _template.format(BOLD_RED)
    }

    def format(self, record: logging.LogRecord):
        return logging.Formatter(self.FORMATS.get(record.levelno)).format(record)

class FileFormatter(logging.Formatter):
    FORMAT = "[%(asctime)s (%(module)s:%(lineno)d - %(funcName)s())] %(levelname)s -> %(message)s"

    def format(self, record: logging.LogRecord):
        return logging.Formatter(self.FORMAT).format(record)

class Logger(logging.Logger, metaclass=Singleton):
    """
    Process-wide logger for the demo.
    The first Logger(...) call decides level and handlers, every later
    Logger() gets the same object back. Nothing is written to stdout.
    """

    def __init__(self, level: str = 'info', to_screen: bool = True,
                 to_file: bool = False, log_dir: str = 'Logs') -> None:
        """
        level: debug, info, warn, error, fatal
        log_dir: directory to store log files, default is 'Logs'
        """
        if level not in LEVELS:
            raise ValueError(f"Unknown log level '{level}', expected one of {list(LEVELS)}")
        super().__init__("creational")
        lvl_val = LEVELS[level]
        self.setLevel(lvl_val)
        self.propagate = False

        # Log to console (stderr)
        if to_screen:
            h = logging.StreamHandler()
            h.setLevel(lvl_val)
            h.setFormatter(ScreenFormatter())
            self.addHandler(h)

        # Log to file, one file per day
        if to_file:
            os.makedirs(log_dir, exist_ok=True)
            log_filename = os.path.join(log_dir, f"log_{datetime.now().strftime('%Y-%m-%d')}.log")
            h = logging.FileHandler(log_filename, encoding="utf-8")
            h.setLevel(lvl_val)
            h.setFormatter(FileFormatter())
            self.addHandler(h)

        if not self.handlers:
            self.addHandler(logging.NullHandler())
