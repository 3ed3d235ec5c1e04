"""
Best-effort class name recovery for spark_launcher

Used when spark-submit arguments cannot be parsed: the class the user
wanted to run may need its own usage text, so we try to find --class in
the rejected arguments without validating anything else.
"""

import logging
from typing import List, Optional, Sequence

from .base import SubmitOptionParser


class MainClassOptionParser(SubmitOptionParser):
    """Records the value of --class; everything else is ignored"""

    def __init__(self):
        self.class_name = None

    def handle(self, opt: str, value: Optional[str]) -> bool:
        if opt == self.CLASS:
            self.class_name = value
        # The first recognised option ends the search
        return False

    def handle_unknown(self, opt: str) -> bool:
        return False

    def handle_extra_args(self, extra: List[str]) -> None:
        pass


def recover_class_name(args: Sequence[str]) -> Optional[str]:
    """
    Try to find the --class value in a list of spark-submit arguments

    Args:
        args: Arguments rejected by the spark-submit command builder

    Returns:
        Optional[str]: Class name, or None if it could not be found
    """
    parser = MainClassOptionParser()
    try:
        parser.parse(args)
    except Exception as e:
        logging.debug("Ignoring error while looking for the main class: %s", e)
        return None
    return parser.class_name


def usage_error_args(class_name: Optional[str]) -> List[str]:
    """
    Build the arguments that make spark-submit print its usage text

    Args:
        class_name: Recovered class name, if any

    Returns:
        List[str]: ["--class", class_name, "--usage-error"] or ["--usage-error"]
    """
    help_args = []
    if class_name is not None:
        help_args.append(SubmitOptionParser.CLASS)
        help_args.append(class_name)
    help_args.append(SubmitOptionParser.USAGE_ERROR)
    return help_args
