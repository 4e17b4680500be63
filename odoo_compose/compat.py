"""
Compatibility
=============

Thin helpers around the standard library that the rest of the package
relies on. This is an internal module and you shouldn't import things
here in your project as they may change without notice.
"""
import sys
import shlex
import signal
import subprocess
import logging

_logger = logging.getLogger(__name__)

quote = shlex.quote
split = shlex.split


def pipe(args):
    """
    Call the process with std(in,out,err)

    Parameters:
        args (List<str>): A list of parameters to be passed to Popen.

    Returns:
        returncode (int): The returncode of the program
    """
    _logger.info(
        "Executing external command %s",
        " ".join(quote(arg) for arg in args)
    )

    process = subprocess.Popen(
        args,
        stdin=sys.stdin,
        stdout=sys.stdout,
        stderr=sys.stderr,
    )

    process.wait()

    _logger.info(
        "External command execution completed with returncode(%s)",
        process.returncode
    )

    if process.returncode < 0:
        _logger.info(
            "External command killed by %s",
            signal_name(-process.returncode)
        )

    return process.returncode


def signal_name(signum):
    try:
        return signal.Signals(signum).name
    except ValueError:
        return "signal {}".format(signum)
