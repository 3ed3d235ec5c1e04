"""
spark_launcher.config - Launcher configuration

The launcher takes no options of its own (every argument belongs to the
launched class), so its settings come from environment variables.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .utils import is_empty

# Echo the command line to stderr when set to any non-empty value
PRINT_LAUNCH_COMMAND_ENV = "SPARK_PRINT_LAUNCH_COMMAND"
# Echo the command line regardless of SPARK_PRINT_LAUNCH_COMMAND
FORCE_PRINT_ENV = "SPARK_LAUNCHER_FORCE_PRINT"
LOG_LEVEL_ENV = "SPARK_LAUNCHER_LOG_LEVEL"
LOG_FILE_ENV = "SPARK_LAUNCHER_LOG_FILE"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
DEFAULT_LOG_LEVEL = "warning"

TRUE_VALUES = ("1", "true", "yes", "on")


def parse_bool(value: Optional[str]) -> bool:
    """Interpret an environment flag (1/true/yes/on, case-insensitive)"""
    if value is None:
        return False
    return value.strip().lower() in TRUE_VALUES


@dataclass
class LauncherConfig:
    """Settings for one launcher run"""

    print_launch_command: bool = False
    force_print_launch_command: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "LauncherConfig":
        """
        Build the configuration from environment variables

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            LauncherConfig: Parsed settings; unknown log levels fall back to warning
        """
        if environ is None:
            environ = os.environ

        log_level = environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().lower()
        if log_level not in LOG_LEVELS:
            logging.warning(
                "Invalid %s '%s', using default '%s'", LOG_LEVEL_ENV, log_level, DEFAULT_LOG_LEVEL
            )
            log_level = DEFAULT_LOG_LEVEL

        log_file = environ.get(LOG_FILE_ENV)

        return cls(
            print_launch_command=not is_empty(environ.get(PRINT_LAUNCH_COMMAND_ENV)),
            force_print_launch_command=parse_bool(environ.get(FORCE_PRINT_ENV)),
            log_level=log_level,
            log_file=Path(log_file) if not is_empty(log_file) else None,
        )

    @property
    def echo_enabled(self) -> bool:
        """Whether the composed command line is echoed to stderr"""
        return self.force_print_launch_command or self.print_launch_command

    @property
    def logging_level(self) -> int:
        return LOG_LEVELS.get(self.log_level, logging.WARNING)

    def log_config_summary(self):
        """Log the active settings at debug level"""
        logging.debug("Launcher configuration:")
        logging.debug("  Print launch command: %s", self.print_launch_command)
        logging.debug("  Forced print: %s", self.force_print_launch_command)
        logging.debug("  Log level: %s", self.log_level)
        logging.debug("  Log file: %s", self.log_file or "none")
