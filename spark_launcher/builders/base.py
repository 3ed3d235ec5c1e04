"""
Base command builder for spark_launcher

Clean hierarchy:
AbstractCommandBuilder (abstract) - java executable, classpath, java options
├── SparkClassCommandBuilder - internal Spark classes (Master, Worker, ...)
└── SparkSubmitCommandBuilder - spark-submit applications
"""

import logging
import os
import shlex
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from ..exceptions import InvalidArgumentsError, LauncherError
from ..systems import SystemDetector
from ..utils import first_non_empty, is_empty, split_path_list

DEFAULT_MEM = "1g"
DEFAULT_SCALA_VERSION = "2.11"


class AbstractCommandBuilder(ABC):
    """
    Abstract base class for command builders

    The builder reads its configuration from an explicit environment mapping
    (os.environ by default) so that the command can be built for any
    environment and platform.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, system=None):
        """
        Initialize base builder

        Args:
            environ: Environment of the launcher (defaults to os.environ)
            system: Platform detector instance (defaults to the host platform)
        """
        self.environ = dict(os.environ if environ is None else environ)
        self.system = system if system is not None else SystemDetector.detect()
        self.child_env: Dict[str, str] = {}

    @abstractmethod
    def build_command(self) -> Tuple[List[str], Dict[str, str]]:
        """
        Build the command to execute

        Returns:
            Tuple of (command tokens, environment variables for the child process)
        """
        pass

    def getenv(self, key: str) -> Optional[str]:
        """Read a variable from the builder's environment"""
        return self.environ.get(key)

    def get_spark_home(self) -> str:
        """Get SPARK_HOME, which every command needs"""
        spark_home = self.getenv("SPARK_HOME")
        if is_empty(spark_home):
            raise LauncherError(
                "Spark home not found; set it explicitly or use the SPARK_HOME "
                "environment variable."
            )
        return spark_home

    def get_conf_dir(self) -> str:
        """Get the configuration directory (SPARK_CONF_DIR or $SPARK_HOME/conf)"""
        return first_non_empty(
            self.getenv("SPARK_CONF_DIR"),
            os.path.join(self.get_spark_home(), "conf"),
        )

    def get_scala_version(self) -> str:
        return first_non_empty(self.getenv("SPARK_SCALA_VERSION"), DEFAULT_SCALA_VERSION)

    def find_jars_dir(self) -> str:
        """
        Find the directory holding the Spark jars

        Released distributions ship them in $SPARK_HOME/jars; a source build
        keeps them under assembly/target/scala-<version>/jars.

        Raises:
            LauncherError: If neither directory exists
        """
        spark_home = Path(self.get_spark_home())
        candidates = [
            spark_home / "jars",
            spark_home / "assembly" / "target" / f"scala-{self.get_scala_version()}" / "jars",
        ]
        for jars_dir in candidates:
            if jars_dir.is_dir():
                return str(jars_dir)
        raise LauncherError(
            f"Library directory '{candidates[-1]}' does not exist; make sure Spark is built."
        )

    def java_executable(self) -> str:
        """Path to the java binary, from JAVA_HOME when it is set"""
        java_home = self.getenv("JAVA_HOME")
        if not is_empty(java_home):
            return os.path.join(java_home, "bin", self.system.java_executable)
        return self.system.java_executable

    def build_classpath(self, app_classpath: Optional[str] = None) -> List[str]:
        """
        Build the classpath for the application

        Entries are de-duplicated keeping their first position; directories
        get a trailing separator.

        Args:
            app_classpath: Extra classpath entries for the application

        Returns:
            List[str]: Classpath entries in order
        """
        separator = self.system.path_separator
        entries: List[str] = []

        def add(value: Optional[str]):
            for entry in split_path_list(value, separator):
                if os.path.isdir(entry) and not entry.endswith(os.sep):
                    entry += os.sep
                if entry not in entries:
                    entries.append(entry)

        add(self.getenv("SPARK_CLASSPATH"))
        add(app_classpath)
        add(self.get_conf_dir())
        add(os.path.join(self.find_jars_dir(), "*"))
        add(self.getenv("HADOOP_CONF_DIR"))
        add(self.getenv("YARN_CONF_DIR"))
        add(self.getenv("SPARK_DIST_CLASSPATH"))
        return entries

    def build_java_command(self, extra_classpath: Optional[str] = None) -> List[str]:
        """Build the java command prefix: [java, -cp, classpath]"""
        classpath = self.system.path_separator.join(self.build_classpath(extra_classpath))
        cmd = [self.java_executable(), "-cp", classpath]
        logging.debug("Java command prefix: %s", cmd)
        return cmd

    @staticmethod
    def add_option_string(cmd: List[str], options: Optional[str]) -> None:
        """Split a java options string the way a shell would and append it"""
        if is_empty(options):
            return
        try:
            cmd.extend(shlex.split(options))
        except ValueError as e:
            raise InvalidArgumentsError(f"Invalid option string: {options} ({e})")

    @staticmethod
    def check_no_max_heap(key: str, options: Optional[str]) -> None:
        """Max heap must come from the memory settings, not from java options"""
        if not is_empty(options) and "Xmx" in options:
            raise InvalidArgumentsError(
                f"{key} is not allowed to specify max heap(Xmx) memory settings "
                f"(was {options}). Use the corresponding configuration instead."
            )
