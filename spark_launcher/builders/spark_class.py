"""
Command builder for internal Spark classes

Used by bin/spark-class for daemons (Master, Worker, HistoryServer, ...)
and any other class; the class arguments are passed through untouched.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..utils import first_non_empty
from .base import DEFAULT_MEM, AbstractCommandBuilder

DAEMON_OPTS = "SPARK_DAEMON_JAVA_OPTS"
DAEMON_MEMORY = "SPARK_DAEMON_MEMORY"
DAEMON_CLASSPATH = "SPARK_DAEMON_CLASSPATH"

# class name -> (java options variables, memory variable, extra classpath variable)
CLASS_SETTINGS = {
    "org.apache.spark.deploy.master.Master": (
        [DAEMON_OPTS, "SPARK_MASTER_OPTS"], DAEMON_MEMORY, DAEMON_CLASSPATH,
    ),
    "org.apache.spark.deploy.worker.Worker": (
        [DAEMON_OPTS, "SPARK_WORKER_OPTS"], DAEMON_MEMORY, DAEMON_CLASSPATH,
    ),
    "org.apache.spark.deploy.history.HistoryServer": (
        [DAEMON_OPTS, "SPARK_HISTORY_OPTS"], DAEMON_MEMORY, DAEMON_CLASSPATH,
    ),
    "org.apache.spark.executor.CoarseGrainedExecutorBackend": (
        ["SPARK_EXECUTOR_OPTS"], "SPARK_EXECUTOR_MEMORY", "SPARK_EXECUTOR_CLASSPATH",
    ),
    "org.apache.spark.executor.MesosExecutorBackend": (
        ["SPARK_EXECUTOR_OPTS"], "SPARK_EXECUTOR_MEMORY", "SPARK_EXECUTOR_CLASSPATH",
    ),
    "org.apache.spark.deploy.mesos.MesosClusterDispatcher": (
        [DAEMON_OPTS], None, DAEMON_CLASSPATH,
    ),
    "org.apache.spark.deploy.ExternalShuffleService": (
        [DAEMON_OPTS, "SPARK_SHUFFLE_OPTS"], DAEMON_MEMORY, DAEMON_CLASSPATH,
    ),
    "org.apache.spark.deploy.mesos.MesosExternalShuffleService": (
        [DAEMON_OPTS, "SPARK_SHUFFLE_OPTS"], DAEMON_MEMORY, DAEMON_CLASSPATH,
    ),
}

DEFAULT_SETTINGS = ([], "SPARK_DRIVER_MEMORY", None)


class SparkClassCommandBuilder(AbstractCommandBuilder):
    """Builds the command for an internal Spark class"""

    def __init__(
        self,
        class_name: str,
        class_args: Sequence[str],
        environ: Optional[Mapping[str, str]] = None,
        system=None,
    ):
        super().__init__(environ, system)
        self.class_name = class_name
        self.class_args = list(class_args)

    def build_command(self) -> Tuple[List[str], Dict[str, str]]:
        java_opts_keys, mem_key, classpath_key = CLASS_SETTINGS.get(
            self.class_name, DEFAULT_SETTINGS
        )
        logging.debug(
            "Building command for %s (options from %s, memory from %s)",
            self.class_name, java_opts_keys or "-", mem_key or "-",
        )

        extra_classpath = self.getenv(classpath_key) if classpath_key else None
        cmd = self.build_java_command(extra_classpath)

        for key in java_opts_keys:
            value = self.getenv(key)
            self.check_no_max_heap(key, value)
            self.add_option_string(cmd, value)

        memory = first_non_empty(self.getenv(mem_key) if mem_key else None, DEFAULT_MEM)
        cmd.append(f"-Xmx{memory}")
        cmd.append(self.class_name)
        cmd.extend(self.class_args)
        return cmd, dict(self.child_env)
