"""
Unit tests for option parsing and main class recovery
"""

import pytest

from spark_launcher.args import (
    MainClassOptionParser,
    SubmitOptionParser,
    recover_class_name,
    usage_error_args,
)
from spark_launcher.exceptions import InvalidArgumentsError


class RecordingParser(SubmitOptionParser):
    """Records every callback; stops on the first unknown argument"""

    def __init__(self):
        self.options = []
        self.unknown = []
        self.extra = None

    def handle(self, opt, value):
        self.options.append((opt, value))
        return True

    def handle_unknown(self, opt):
        self.unknown.append(opt)
        return False

    def handle_extra_args(self, extra):
        self.extra = extra


class TestSubmitOptionParser:
    """Test the spark-submit grammar"""

    def test_options_and_switches(self):
        parser = RecordingParser()
        parser.parse(["--master", "local[2]", "--verbose", "app.jar", "a", "--b"])
        assert parser.options == [("--master", "local[2]"), ("--verbose", None)]
        assert parser.unknown == ["app.jar"]
        assert parser.extra == ["a", "--b"]

    def test_equals_separated_option(self):
        parser = RecordingParser()
        parser.parse(["--conf=spark.a=b", "--name=my app"])
        assert parser.options == [("--conf", "spark.a=b"), ("--name", "my app")]
        assert parser.extra == []

    def test_aliases_use_canonical_name(self):
        parser = RecordingParser()
        parser.parse(["-c", "k=v", "-h", "-v"])
        assert parser.options == [("--conf", "k=v"), ("--help", None), ("--verbose", None)]

    def test_missing_value(self):
        with pytest.raises(InvalidArgumentsError, match="Missing argument for option '--class'."):
            RecordingParser().parse(["--master", "yarn", "--class"])

    def test_base_hooks_not_implemented(self):
        with pytest.raises(NotImplementedError):
            SubmitOptionParser().parse(["--master", "local"])


class TestMainClassOptionParser:
    """Test the best-effort --class parser"""

    def test_records_class(self):
        parser = MainClassOptionParser()
        parser.parse(["--class", "Foo", "--bogus"])
        assert parser.class_name == "Foo"

    def test_stops_at_first_option(self):
        """Only the first recognised option is looked at"""
        parser = MainClassOptionParser()
        parser.parse(["--master", "local", "--class", "Foo"])
        assert parser.class_name is None

    def test_unknown_option_ignored(self):
        parser = MainClassOptionParser()
        parser.parse(["--bogus", "--class", "Foo"])
        assert parser.class_name is None


class TestRecoverClassName:
    """Test recover_class_name and usage_error_args"""

    def test_recovers_class(self):
        assert recover_class_name(["--class", "Foo", "--bogus"]) == "Foo"

    def test_equals_form(self):
        assert recover_class_name(["--class=org.example.App", "-x"]) == "org.example.App"

    def test_no_class(self):
        assert recover_class_name(["--bogus"]) is None
        assert recover_class_name([]) is None

    def test_parse_errors_are_swallowed(self):
        """A missing option value means no class, not an exception"""
        assert recover_class_name(["--class"]) is None

    def test_usage_error_args_with_class(self):
        assert usage_error_args("Foo") == ["--class", "Foo", "--usage-error"]

    def test_usage_error_args_without_class(self):
        assert usage_error_args(None) == ["--usage-error"]
