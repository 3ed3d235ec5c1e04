"""
spark_launcher.builders - Command builder strategies

The class name given to the launcher selects the builder: spark-submit
applications get SparkSubmitCommandBuilder, every other class gets
SparkClassCommandBuilder.
"""

import logging
from typing import Mapping, Optional, Sequence

from .base import AbstractCommandBuilder
from .spark_class import SparkClassCommandBuilder
from .spark_submit import SPARK_SUBMIT_CLASS, SparkSubmitCommandBuilder


def is_spark_submit(class_name: str) -> bool:
    return class_name == SPARK_SUBMIT_CLASS


def select_builder(
    class_name: str,
    args: Sequence[str],
    environ: Optional[Mapping[str, str]] = None,
    system=None,
) -> AbstractCommandBuilder:
    """
    Create the command builder for a class

    Args:
        class_name: Class the launcher was asked to run
        args: Arguments for that class
        environ: Environment of the launcher (defaults to os.environ)
        system: Platform detector instance (defaults to the host platform)

    Returns:
        AbstractCommandBuilder: Builder ready for build_command()

    Raises:
        InvalidArgumentsError: If spark-submit arguments are invalid
    """
    if is_spark_submit(class_name):
        logging.debug("Using spark-submit command builder")
        return SparkSubmitCommandBuilder(args, environ=environ, system=system)

    logging.debug("Using spark-class command builder for %s", class_name)
    return SparkClassCommandBuilder(class_name, args, environ=environ, system=system)


__all__ = [
    "AbstractCommandBuilder",
    "SparkClassCommandBuilder",
    "SparkSubmitCommandBuilder",
    "SPARK_SUBMIT_CLASS",
    "is_spark_submit",
    "select_builder",
]
