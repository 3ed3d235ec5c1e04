"""
Exception types raised by the launcher

Only InvalidArgumentsError raised while building a spark-submit command is
recovered locally (see main.run); everything else reaches the caller.
"""


class LauncherError(Exception):
    """Base class for launcher failures"""


class UsageError(LauncherError):
    """The launcher itself was invoked incorrectly (e.g. no class name)"""


class InvalidArgumentsError(LauncherError, ValueError):
    """The arguments cannot be reconciled with a builder's grammar"""
