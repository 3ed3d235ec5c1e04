"""
Command builder for spark-submit

Parses the spark-submit command line up front, so invalid arguments are
reported when the builder is created, and rebuilds the SparkSubmit
arguments in a normalized order when the command is built.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..args import SubmitOptionParser
from ..utils import check_argument, first_non_empty, merge_env_path_list
from .base import DEFAULT_MEM, AbstractCommandBuilder

SPARK_SUBMIT_CLASS = "org.apache.spark.deploy.SparkSubmit"
THRIFT_SERVER_CLASS = "org.apache.spark.sql.hive.thriftserver.HiveThriftServer2"

# Configuration keys set from dedicated command line options
DRIVER_MEMORY = "spark.driver.memory"
DRIVER_EXTRA_CLASSPATH = "spark.driver.extraClassPath"
DRIVER_EXTRA_JAVA_OPTIONS = "spark.driver.extraJavaOptions"
DRIVER_EXTRA_LIBRARY_PATH = "spark.driver.extraLibraryPath"
DEPLOY_MODE_CONF = "spark.submit.deployMode"


class SubmitArgumentsParser(SubmitOptionParser):
    """Collects spark-submit options for SparkSubmitCommandBuilder"""

    CONF_OPTIONS = {
        SubmitOptionParser.DRIVER_MEMORY: DRIVER_MEMORY,
        SubmitOptionParser.DRIVER_JAVA_OPTIONS: DRIVER_EXTRA_JAVA_OPTIONS,
        SubmitOptionParser.DRIVER_LIBRARY_PATH: DRIVER_EXTRA_LIBRARY_PATH,
        SubmitOptionParser.DRIVER_CLASS_PATH: DRIVER_EXTRA_CLASSPATH,
    }

    SPECIAL_SWITCHES = (
        SubmitOptionParser.HELP,
        SubmitOptionParser.USAGE_ERROR,
        SubmitOptionParser.VERSION,
    )

    def __init__(self):
        self.master = None
        self.deploy_mode = None
        self.properties_file = None
        self.main_class = None
        self.verbose = False
        self.conf: Dict[str, str] = {}
        self.parsed_args: List[str] = []
        self.app_resource = None
        self.app_args: List[str] = []
        self.is_special_command = False

    def handle(self, opt: str, value: Optional[str]) -> bool:
        if opt == self.MASTER:
            self.master = value
        elif opt == self.DEPLOY_MODE:
            self.deploy_mode = value
        elif opt == self.PROPERTIES_FILE:
            self.properties_file = value
        elif opt == self.VERBOSE:
            self.verbose = True
        elif opt in self.CONF_OPTIONS:
            self.conf[self.CONF_OPTIONS[opt]] = value
        elif opt == self.CONF:
            key, sep, conf_value = value.partition("=")
            check_argument(bool(sep), "Invalid argument to %s: %s", self.CONF, value)
            self.conf[key] = conf_value
        elif opt == self.CLASS:
            self.main_class = value
        elif opt in (self.KILL_SUBMISSION, self.STATUS):
            self.is_special_command = True
            self.parsed_args.extend([opt, value])
        elif opt in self.SPECIAL_SWITCHES:
            self.is_special_command = True
            self.parsed_args.append(opt)
        else:
            self.parsed_args.append(opt)
            if value is not None:
                self.parsed_args.append(value)
        return True

    def handle_unknown(self, opt: str) -> bool:
        check_argument(not opt.startswith("-"), "Unrecognized option: %s", opt)
        # The first positional argument is the application resource
        self.app_resource = opt
        return False

    def handle_extra_args(self, extra: List[str]) -> None:
        self.app_args.extend(extra)


class SparkSubmitCommandBuilder(AbstractCommandBuilder):
    """
    Builds the command for org.apache.spark.deploy.SparkSubmit

    Raises InvalidArgumentsError from the constructor when the arguments do
    not follow the spark-submit grammar. A missing application resource is
    also rejected here rather than in build_command(), so run() can fall back
    to the usage-error command before any command is built.
    """

    def __init__(
        self,
        args: Sequence[str],
        environ: Optional[Mapping[str, str]] = None,
        system=None,
    ):
        super().__init__(environ, system)
        self.parser = SubmitArgumentsParser()
        if args:
            self.parser.parse(args)
            if not self.parser.is_special_command:
                check_argument(
                    self.parser.app_resource is not None, "Missing application resource."
                )
        else:
            # Without arguments SparkSubmit prints its usage
            self.parser.is_special_command = True

    def is_client_mode(self) -> bool:
        """The driver runs in this JVM unless the app is deployed in cluster mode"""
        deploy_mode = first_non_empty(
            self.parser.deploy_mode, self.parser.conf.get(DEPLOY_MODE_CONF)
        )
        master = self.parser.master
        return master != "yarn-cluster" and deploy_mode in (None, "client")

    def build_command(self) -> Tuple[List[str], Dict[str, str]]:
        conf = self.parser.conf
        client_mode = self.is_client_mode()
        is_thrift_server = self.parser.main_class == THRIFT_SERVER_CLASS

        extra_classpath = conf.get(DRIVER_EXTRA_CLASSPATH) if client_mode else None
        cmd = self.build_java_command(extra_classpath)

        if is_thrift_server:
            self.add_option_string(cmd, self.getenv("SPARK_DAEMON_JAVA_OPTS"))
        self.add_option_string(cmd, self.getenv("SPARK_SUBMIT_OPTS"))

        driver_java_options = conf.get(DRIVER_EXTRA_JAVA_OPTIONS)
        self.check_no_max_heap(DRIVER_EXTRA_JAVA_OPTIONS, driver_java_options)

        if client_mode:
            thrift_memory = self.getenv("SPARK_DAEMON_MEMORY") if is_thrift_server else None
            memory = first_non_empty(
                thrift_memory,
                conf.get(DRIVER_MEMORY),
                self.getenv("SPARK_DRIVER_MEMORY"),
                self.getenv("SPARK_MEM"),
                DEFAULT_MEM,
            )
            cmd.append(f"-Xmx{memory}")
            self.add_option_string(cmd, driver_java_options)
            merge_env_path_list(
                self.child_env,
                self.system.lib_path_env_name,
                conf.get(DRIVER_EXTRA_LIBRARY_PATH),
                self.environ,
                self.system.path_separator,
            )

        cmd.append(SPARK_SUBMIT_CLASS)
        cmd.extend(self.build_spark_submit_args())
        logging.debug("spark-submit command built (client mode: %s)", client_mode)
        return cmd, dict(self.child_env)

    def build_spark_submit_args(self) -> List[str]:
        """Rebuild the SparkSubmit arguments from the parsed options"""
        parser = self.parser
        args = []
        if parser.verbose:
            args.append(SubmitOptionParser.VERBOSE)
        if parser.master is not None:
            args.extend([SubmitOptionParser.MASTER, parser.master])
        if parser.deploy_mode is not None:
            args.extend([SubmitOptionParser.DEPLOY_MODE, parser.deploy_mode])
        for key, value in parser.conf.items():
            args.extend([SubmitOptionParser.CONF, f"{key}={value}"])
        if parser.properties_file is not None:
            args.extend([SubmitOptionParser.PROPERTIES_FILE, parser.properties_file])
        if parser.main_class is not None:
            args.extend([SubmitOptionParser.CLASS, parser.main_class])
        args.extend(parser.parsed_args)
        if parser.app_resource is not None:
            args.append(parser.app_resource)
        args.extend(parser.app_args)
        return args
