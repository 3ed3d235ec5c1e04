"""
Tests for the launcher entry point
"""

import io
import logging
import os

import pytest

import spark_launcher.main as launcher_main
from spark_launcher.builders import SPARK_SUBMIT_CLASS
from spark_launcher.config import LauncherConfig
from spark_launcher.exceptions import InvalidArgumentsError, LauncherError, UsageError
from spark_launcher.main import SEPARATOR_LINE, main, run

WORKER = "org.apache.spark.deploy.worker.Worker"


def launch(args, environ, os_name="Linux", config=None):
    """Run the launcher and return (stdout, stderr)"""
    stdout = io.StringIO()
    stderr = io.StringIO()
    status = run(
        args,
        config=config or LauncherConfig(),
        environ=environ,
        os_name=os_name,
        stdout=stdout,
        stderr=stderr,
    )
    assert status == 0
    return stdout.getvalue(), stderr.getvalue()


def tokens(output):
    parts = output.split("\0")
    assert parts[-1] == ""
    return parts[:-1]


class TestUnixOutput:
    """Test the NUL separated output for bin/spark-class"""

    def test_worker_scenario(self, spark_env, classpath):
        out, err = launch([WORKER, "--webui-port", "8081", "spark://host:7077"], spark_env)
        assert tokens(out) == [
            "/opt/java/bin/java", "-cp", classpath, "-Xmx1g", WORKER,
            "--webui-port", "8081", "spark://host:7077",
        ]
        assert not out.endswith("\n")
        assert err == ""

    def test_env_prefix(self, spark_env, classpath):
        spark_env["LD_LIBRARY_PATH"] = "/usr/lib"
        out, _ = launch(
            [SPARK_SUBMIT_CLASS, "--driver-library-path", "/native", "app.jar"], spark_env
        )
        result = tokens(out)
        assert result[:3] == ["env", "LD_LIBRARY_PATH=/usr/lib:/native", "/opt/java/bin/java"]
        assert result[-1] == "app.jar"

    def test_undecodable_argument_passed_through(self, spark_env):
        arg = os.fsdecode(b"caf\xe9.txt")
        stdout = io.TextIOWrapper(io.BytesIO(), encoding="utf-8", errors="strict")
        run(
            [WORKER, arg],
            config=LauncherConfig(),
            environ=spark_env,
            os_name="Linux",
            stdout=stdout,
            stderr=io.StringIO(),
        )
        parts = stdout.buffer.getvalue().split(b"\0")
        assert parts[-2:] == [os.fsencode(arg), b""]


class TestWindowsOutput:
    """Test the command line for bin/spark-class2.cmd"""

    def test_single_line(self, spark_env):
        out, _ = launch(["org.example.Tool", 'say "hi"', "plain"], spark_env, os_name="Windows")
        assert out.count("\n") == 1
        assert out.endswith(' "say ""hi""" plain \n')
        assert out.startswith("/opt/java/bin/java.exe -cp ")

    def test_env_assignment(self, spark_env):
        out, _ = launch(
            [SPARK_SUBMIT_CLASS, "--driver-library-path", "C:\\native", "app.jar"],
            spark_env,
            os_name="Windows",
        )
        assert out.startswith("set PATH=C:\\native && /opt/java/bin/java.exe ")


class TestLaunchCommandEcho:
    """Test the command line echo on stderr"""

    def test_echo_disabled_by_default(self, spark_env):
        _, err = launch([WORKER], spark_env, config=LauncherConfig.from_environ({}))
        assert err == ""

    def test_echo_from_signal(self, spark_env, classpath):
        config = LauncherConfig.from_environ({"SPARK_PRINT_LAUNCH_COMMAND": "1"})
        _, err = launch([WORKER, "spark://host:7077"], spark_env, config=config)
        assert err == (
            f"Spark Command: /opt/java/bin/java -cp {classpath} -Xmx1g {WORKER} spark://host:7077\n"
            + "=" * 40 + "\n"
        )

    def test_forced_echo(self, spark_env):
        config = LauncherConfig(force_print_launch_command=True)
        _, err = launch([WORKER], spark_env, config=config)
        assert err.startswith("Spark Command: ")
        assert err.endswith(SEPARATOR_LINE + "\n")

    def test_config_from_environ_argument(self, spark_env):
        spark_env["SPARK_PRINT_LAUNCH_COMMAND"] = "1"
        stderr = io.StringIO()
        run([WORKER], environ=spark_env, os_name="Linux", stdout=io.StringIO(), stderr=stderr)
        assert stderr.getvalue().startswith("Spark Command: ")


class TestUsageErrorRecovery:
    """Test the recovery path for invalid spark-submit arguments"""

    def test_recovered_class(self, spark_env, classpath):
        config = LauncherConfig(force_print_launch_command=True)
        out, err = launch(
            [SPARK_SUBMIT_CLASS, "--class", "Foo", "--bogus"], spark_env, config=config
        )
        assert tokens(out) == [
            "/opt/java/bin/java", "-cp", classpath, "-Xmx1g", SPARK_SUBMIT_CLASS,
            "--class", "Foo", "--usage-error",
        ]
        # The echo is turned off so only the error is shown
        assert err == "Error: Unrecognized option: --bogus\n\n"

    def test_no_class(self, spark_env):
        out, err = launch([SPARK_SUBMIT_CLASS, "--master", "local"], spark_env)
        assert tokens(out)[-2:] == [SPARK_SUBMIT_CLASS, "--usage-error"]
        assert err == "Error: Missing application resource.\n\n"

    def test_recovery_parse_error_swallowed(self, spark_env):
        out, err = launch([SPARK_SUBMIT_CLASS, "--class"], spark_env)
        assert tokens(out)[-2:] == [SPARK_SUBMIT_CLASS, "--usage-error"]
        assert err == "Error: Missing argument for option '--class'.\n\n"

    def test_class_builder_errors_propagate(self, spark_env):
        """Only spark-submit argument errors are recovered"""
        spark_env["SPARK_WORKER_OPTS"] = "-Xmx2g"
        with pytest.raises(InvalidArgumentsError):
            launch([WORKER], spark_env)

    def test_environment_errors_propagate(self):
        with pytest.raises(LauncherError):
            launch([WORKER], {})


class TestMissingClassName:
    """Test invocation without arguments"""

    def test_run_raises_usage_error(self):
        with pytest.raises(UsageError, match="missing class name"):
            run([], config=LauncherConfig())

    def test_main_exit_status(self, monkeypatch, capsys, restore_logging):
        def fail(*args, **kwargs):
            raise AssertionError("builder must not be created")

        monkeypatch.setattr(launcher_main, "select_builder", fail)
        monkeypatch.setattr(launcher_main, "SparkSubmitCommandBuilder", fail)

        assert main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: Not enough arguments: missing class name.\n"


class TestMain:
    """Test the console entry point"""

    def test_main_writes_command(self, monkeypatch, capsys, spark_env, restore_logging):
        for key, value in spark_env.items():
            monkeypatch.setenv(key, value)
        monkeypatch.delenv("SPARK_PRINT_LAUNCH_COMMAND", raising=False)
        monkeypatch.delenv("SPARK_LAUNCHER_FORCE_PRINT", raising=False)
        monkeypatch.setattr("platform.system", lambda: "Linux")

        assert main([WORKER, "spark://host:7077"]) == 0
        captured = capsys.readouterr()
        assert tokens(captured.out)[-2:] == [WORKER, "spark://host:7077"]

    def test_setup_logging_with_file(self, tmp_path, restore_logging):
        log_file = tmp_path / "log" / "launcher.log"
        launcher_main.setup_logging(LauncherConfig(log_level="debug", log_file=log_file))
        logging.debug("launcher test message")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "launcher test message" in log_file.read_text(encoding="utf-8")
