"""
spark_launcher.serializer - Command output for the calling scripts

Windows: a single command line for bin/spark-class2.cmd.
Unix: a list of tokens written NUL-terminated for bin/spark-class, which
reads them back into a bash array.
"""

import os
from typing import List, Mapping, Sequence, TextIO

from .utils import quote_for_batch_script


def prepare_windows_command(cmd: Sequence[str], child_env: Mapping[str, str]) -> str:
    """
    Prepare a command line for execution from a Windows batch script

    All arguments are quoted so that spaces are handled as expected. Quotes
    within arguments are "double quoted" (which is batch for escaping a
    quote). Environment variables are set with "set" commands chained in
    front of the command.

    Args:
        cmd: Command tokens
        child_env: Environment variables for the child process

    Returns:
        str: Command line, including the trailing space
    """
    cmdline = []
    for key, value in child_env.items():
        cmdline.append(f"set {key}={value}")
        cmdline.append(" && ")
    for arg in cmd:
        cmdline.append(quote_for_batch_script(arg))
        cmdline.append(" ")
    return "".join(cmdline)


def prepare_bash_command(cmd: List[str], child_env: Mapping[str, str]) -> List[str]:
    """
    Prepare the command for execution from a bash script

    When environment variables are needed, the command is run through
    "env NAME=VALUE ..." so no shell syntax is involved.

    Args:
        cmd: Command tokens
        child_env: Environment variables for the child process

    Returns:
        List[str]: cmd itself if child_env is empty, a new list otherwise
    """
    if not child_env:
        return cmd

    new_cmd = ["env"]
    for key, value in child_env.items():
        new_cmd.append(f"{key}={value}")
    new_cmd.extend(cmd)
    return new_cmd


def write_bash_command(tokens: Sequence[str], stream: TextIO) -> None:
    """
    Write tokens each followed by a NUL character

    NUL is used as separator because it cannot appear in a process argument.
    When the stream is backed by a binary buffer (sys.stdout), tokens are
    written as filesystem bytes so arguments that were not valid in the
    locale encoding (surrogate escapes in sys.argv) come out unchanged.

    Raises:
        ValueError: If a token contains a NUL character
    """
    for token in tokens:
        if "\0" in token:
            raise ValueError(f"Command argument contains a NUL character: {token!r}")

    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        for token in tokens:
            stream.write(token)
            stream.write("\0")
        return

    stream.flush()
    for token in tokens:
        buffer.write(os.fsencode(token) + b"\0")
    buffer.flush()
