import os
import logging
from contextlib import contextmanager
from pathlib import Path


@contextmanager
def cd(directory):
    cwd = Path.cwd()
    try:
        os.chdir(directory)
        yield
    finally:
        os.chdir(str(cwd))


def setup_logger():
    root_logger = logging.getLogger()
    log_level = os.environ.get('PYTHON_LOG', 'ERROR')
    root_logger.setLevel(log_level)
