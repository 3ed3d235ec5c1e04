"""
pytest configuration and fixtures
"""

import logging

import pytest

from spark_launcher.systems import SystemDetector


@pytest.fixture
def spark_home(tmp_path):
    """Create a minimal Spark distribution layout"""
    home = tmp_path / "spark"
    (home / "jars").mkdir(parents=True)
    (home / "conf").mkdir()
    return home


@pytest.fixture
def spark_env(spark_home):
    """Launcher environment pointing at the fake distribution"""
    return {
        "SPARK_HOME": str(spark_home),
        "JAVA_HOME": "/opt/java",
    }


@pytest.fixture
def classpath(spark_home):
    """Classpath built for spark_env on a Unix system"""
    return f"{spark_home}/conf/:{spark_home}/jars/*"


@pytest.fixture
def linux():
    return SystemDetector.detect("Linux")


@pytest.fixture
def windows():
    return SystemDetector.detect("Windows")


@pytest.fixture
def restore_logging():
    """Restore the root logger after a test that configures logging"""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
