"""
spark_launcher - Launcher bootstrap for Spark scripts

Resolves the command builder for a target class, builds the java command
line and serializes it for the calling bin/spark-class (Unix) or
bin/spark-class2.cmd (Windows) script.
"""

__version__ = "2.3.2"
__author__ = "spark-launcher contributors"
__license__ = "Apache-2.0"

from .builders import (
    SPARK_SUBMIT_CLASS,
    SparkClassCommandBuilder,
    SparkSubmitCommandBuilder,
    select_builder,
)
from .config import LauncherConfig
from .exceptions import InvalidArgumentsError, LauncherError, UsageError
from .serializer import prepare_bash_command, prepare_windows_command
from .args import recover_class_name

__all__ = [
    "SPARK_SUBMIT_CLASS",
    "SparkClassCommandBuilder",
    "SparkSubmitCommandBuilder",
    "select_builder",
    "LauncherConfig",
    "InvalidArgumentsError",
    "LauncherError",
    "UsageError",
    "prepare_bash_command",
    "prepare_windows_command",
    "recover_class_name",
]
