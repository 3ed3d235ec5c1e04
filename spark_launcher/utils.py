"""
spark_launcher.utils - Helpers shared by the command builders

String checks, batch script quoting and environment path list merging.
"""

import os
from typing import Iterable, Mapping, MutableMapping, Optional

from .exceptions import InvalidArgumentsError

# Characters that force an argument to be quoted in a batch script
BATCH_SPECIAL_CHARS = ('"', "=", ",", ";")


def is_empty(value: Optional[str]) -> bool:
    """Return True for None or the empty string"""
    return value is None or value == ""


def first_non_empty(*candidates: Optional[str]) -> Optional[str]:
    """Return the first candidate that is neither None nor empty"""
    for candidate in candidates:
        if not is_empty(candidate):
            return candidate
    return None


def join(separator: str, *elements: Optional[str]) -> str:
    """Join the non-empty elements with the given separator"""
    return separator.join(e for e in elements if not is_empty(e))


def check_argument(condition: bool, message: str, *args) -> None:
    """
    Raise InvalidArgumentsError when condition does not hold

    Args:
        condition: Condition that must be true
        message: printf-style message template
        *args: Values for the message template
    """
    if not condition:
        raise InvalidArgumentsError(message % args if args else message)


def quote_for_batch_script(arg: str) -> str:
    """
    Quote a command argument for a command to be run by a Windows batch script

    Arguments containing whitespace or one of the batch special characters are
    wrapped in double quotes, and embedded quotes are doubled ("" is how batch
    escapes a quote). A trailing backslash is doubled so it does not escape
    the closing quote. See http://ss64.com/nt/syntax-esc.html

    Args:
        arg: Argument to quote

    Returns:
        str: Argument safe to paste into a batch command line
    """
    needs_quotes = any(c.isspace() or c in BATCH_SPECIAL_CHARS for c in arg)
    if not needs_quotes:
        return arg

    quoted = ['"']
    for c in arg:
        if c == '"':
            quoted.append('"')
        quoted.append(c)
    if arg.endswith("\\"):
        quoted.append("\\")
    quoted.append('"')
    return "".join(quoted)


def merge_env_path_list(
    child_env: MutableMapping[str, str],
    env_key: str,
    path_list: Optional[str],
    environ: Mapping[str, str],
    separator: str = os.pathsep,
) -> None:
    """
    Append a path list to an environment variable of the child process

    The current value is taken from child_env first, then from the launcher's
    own environment.
    """
    if is_empty(path_list):
        return
    current = first_non_empty(child_env.get(env_key), environ.get(env_key))
    child_env[env_key] = join(separator, current, path_list)


def split_path_list(value: Optional[str], separator: str = os.pathsep) -> Iterable[str]:
    """Split a path list, dropping empty entries"""
    if is_empty(value):
        return []
    return [entry for entry in value.split(separator) if entry]
