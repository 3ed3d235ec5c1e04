"""
Submission option parser for spark_launcher

Knows the spark-submit command line grammar: which options take a value,
which are switches, and how "--opt=value" is split. Subclasses decide what
to do with each recognised option through the handle* hooks.
"""

import re
from typing import List, Optional, Sequence

from ..exceptions import InvalidArgumentsError


class SubmitOptionParser:
    """Parser for spark-submit style command lines"""

    # Options that take a value
    CLASS = "--class"
    CONF = "--conf"
    DEPLOY_MODE = "--deploy-mode"
    DRIVER_CLASS_PATH = "--driver-class-path"
    DRIVER_CORES = "--driver-cores"
    DRIVER_JAVA_OPTIONS = "--driver-java-options"
    DRIVER_LIBRARY_PATH = "--driver-library-path"
    DRIVER_MEMORY = "--driver-memory"
    EXECUTOR_MEMORY = "--executor-memory"
    FILES = "--files"
    JARS = "--jars"
    KILL_SUBMISSION = "--kill"
    MASTER = "--master"
    NAME = "--name"
    PACKAGES = "--packages"
    PACKAGES_EXCLUDE = "--exclude-packages"
    PROPERTIES_FILE = "--properties-file"
    PROXY_USER = "--proxy-user"
    PY_FILES = "--py-files"
    REPOSITORIES = "--repositories"
    STATUS = "--status"
    TOTAL_EXECUTOR_CORES = "--total-executor-cores"

    # Options that do not take a value
    HELP = "--help"
    SUPERVISE = "--supervise"
    USAGE_ERROR = "--usage-error"
    VERBOSE = "--verbose"
    VERSION = "--version"

    # YARN-only options
    ARCHIVES = "--archives"
    EXECUTOR_CORES = "--executor-cores"
    KEYTAB = "--keytab"
    NUM_EXECUTORS = "--num-executors"
    PRINCIPAL = "--principal"
    QUEUE = "--queue"

    # Alias groups; the first name of each group is the one passed to handle()
    OPTS = [
        [ARCHIVES],
        [CLASS],
        [CONF, "-c"],
        [DEPLOY_MODE],
        [DRIVER_CLASS_PATH],
        [DRIVER_CORES],
        [DRIVER_JAVA_OPTIONS],
        [DRIVER_LIBRARY_PATH],
        [DRIVER_MEMORY],
        [EXECUTOR_CORES],
        [EXECUTOR_MEMORY],
        [FILES],
        [JARS],
        [KEYTAB],
        [KILL_SUBMISSION],
        [MASTER],
        [NAME],
        [NUM_EXECUTORS],
        [PACKAGES],
        [PACKAGES_EXCLUDE],
        [PRINCIPAL],
        [PROPERTIES_FILE],
        [PROXY_USER],
        [PY_FILES],
        [QUEUE],
        [REPOSITORIES],
        [STATUS],
        [TOTAL_EXECUTOR_CORES],
    ]

    SWITCHES = [
        [HELP, "-h"],
        [SUPERVISE],
        [USAGE_ERROR],
        [VERBOSE, "-v"],
        [VERSION],
    ]

    EQ_SEPARATED_OPT = re.compile(r"^(--[^=]+)=(.+)$", re.DOTALL)

    def parse(self, args: Sequence[str]) -> None:
        """
        Parse a list of spark-submit command line options

        Each recognised option is passed to handle(); parsing stops as soon
        as a hook returns False. Whatever follows the argument that stopped
        parsing goes to handle_extra_args().

        Args:
            args: Command line arguments (without the class name)

        Raises:
            InvalidArgumentsError: If an option is missing its value
        """
        args = list(args)
        idx = 0
        while idx < len(args):
            arg = args[idx]
            value = None

            match = self.EQ_SEPARATED_OPT.match(arg)
            if match:
                arg = match.group(1)
                value = match.group(2)

            # Look for options with a value
            name = self._find_cli_option(arg, self.OPTS)
            if name is not None:
                if value is None:
                    if idx == len(args) - 1:
                        raise InvalidArgumentsError(
                            f"Missing argument for option '{arg}'."
                        )
                    idx += 1
                    value = args[idx]
                if not self.handle(name, value):
                    break
                idx += 1
                continue

            # Look for a switch
            name = self._find_cli_option(arg, self.SWITCHES)
            if name is not None:
                if not self.handle(name, None):
                    break
                idx += 1
                continue

            if not self.handle_unknown(arg):
                break
            idx += 1

        if idx < len(args):
            idx += 1
        self.handle_extra_args(args[idx:])

    def handle(self, opt: str, value: Optional[str]) -> bool:
        """
        Callback for when an option with an argument is parsed

        Args:
            opt: Canonical name of the option
            value: Option value, None for switches

        Returns:
            bool: Whether to continue parsing
        """
        raise NotImplementedError

    def handle_unknown(self, opt: str) -> bool:
        """
        Callback for when an unrecognized option is parsed

        Returns:
            bool: Whether to continue parsing
        """
        raise NotImplementedError

    def handle_extra_args(self, extra: List[str]) -> None:
        """Callback for remaining command line arguments after parsing stopped"""
        raise NotImplementedError

    @staticmethod
    def _find_cli_option(name: str, available) -> Optional[str]:
        for candidates in available:
            if name in candidates:
                return candidates[0]
        return None
