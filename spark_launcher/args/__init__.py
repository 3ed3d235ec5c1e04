"""
spark_launcher.args - Command line option parsing

Provides the spark-submit option grammar and the best-effort parser used
to recover the main class name when the arguments are invalid.
"""

from .base import SubmitOptionParser
from .recovery import MainClassOptionParser, recover_class_name, usage_error_args

__all__ = [
    "SubmitOptionParser",     # spark-submit grammar
    "MainClassOptionParser",  # --class recovery
    "recover_class_name",
    "usage_error_args",
]
