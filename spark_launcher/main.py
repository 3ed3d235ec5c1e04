#!/usr/bin/env python3
"""
spark_launcher - Command line interface for the Spark launcher

Usage: spark-launcher <class> [class args]

This CLI works in two different modes:
  - "spark-submit": if class is org.apache.spark.deploy.SparkSubmit, the
    arguments are parsed as a spark-submit command line.
  - "spark-class": any other class is an internal Spark class that is run
    with its arguments passed through.

It works in tandem with bin/spark-class on Unix-like systems and
bin/spark-class2.cmd on Windows, which execute the final command. On
Unix-like systems the output is a list of command arguments, each followed
by a NUL character. On Windows the output is a command line suitable for
direct execution from the script.
"""

import logging
import logging.handlers
import sys
from typing import Mapping, Optional, Sequence, TextIO

from .args import recover_class_name, usage_error_args
from .builders import SparkSubmitCommandBuilder, is_spark_submit, select_builder
from .config import LauncherConfig
from .exceptions import InvalidArgumentsError, UsageError
from .serializer import prepare_bash_command, prepare_windows_command, write_bash_command
from .systems import SystemDetector

SEPARATOR_LINE = "=" * 40


def setup_logging(config: LauncherConfig):
    """Setup logging; records go to stderr (and a log file if configured), never stdout"""
    root_logger = logging.getLogger()
    root_logger.setLevel(config.logging_level)
    root_logger.handlers.clear()

    # stdout carries the command for the calling script
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(config.logging_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            config.log_file, maxBytes=1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setLevel(config.logging_level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(message)s", datefmt="%Y/%m/%d %H:%M:%S"
            )
        )
        root_logger.addHandler(file_handler)


def run(
    raw_args: Sequence[str],
    config: Optional[LauncherConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
    os_name: Optional[str] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Build the command for a class and write it for the calling script

    Args:
        raw_args: Class name followed by its arguments
        config: Launcher settings (defaults to LauncherConfig.from_environ(environ))
        environ: Environment used by the builders (defaults to os.environ)
        os_name: Platform name override (defaults to platform.system())
        stdout: Stream receiving the command (defaults to sys.stdout)
        stderr: Stream receiving diagnostics (defaults to sys.stderr)

    Returns:
        int: Exit status (0)

    Raises:
        UsageError: If no class name is given
    """
    if not raw_args:
        raise UsageError("Not enough arguments: missing class name.")

    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    if config is None:
        config = LauncherConfig.from_environ(environ)

    system = SystemDetector.detect(os_name)

    args = list(raw_args)
    class_name = args.pop(0)
    print_launch_command = config.echo_enabled

    if is_spark_submit(class_name):
        try:
            builder = SparkSubmitCommandBuilder(args, environ=environ, system=system)
        except InvalidArgumentsError as e:
            print_launch_command = False
            print(f"Error: {e}", file=stderr)
            print(file=stderr)

            recovered = recover_class_name(args)
            logging.debug("Recovered main class after invalid arguments: %s", recovered)
            builder = SparkSubmitCommandBuilder(
                usage_error_args(recovered), environ=environ, system=system
            )
    else:
        builder = select_builder(class_name, args, environ=environ, system=system)

    cmd, child_env = builder.build_command()

    if print_launch_command:
        print("Spark Command: " + " ".join(cmd), file=stderr)
        print(SEPARATOR_LINE, file=stderr)
        stderr.flush()

    if system.system_type == "windows":
        print(prepare_windows_command(cmd, child_env), file=stdout)
    else:
        # In bash, use NUL as the arg separator since it cannot be used in an argument
        write_bash_command(prepare_bash_command(cmd, child_env), stdout)
    stdout.flush()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point"""
    if argv is None:
        argv = sys.argv[1:]

    config = LauncherConfig.from_environ()
    setup_logging(config)
    config.log_config_summary()

    try:
        return run(argv, config=config)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
