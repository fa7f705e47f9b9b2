# logger.py

import os, sys, logging
from typing import Optional
from functools import partial

class Logger:
    """
    Thin wrapper around a stdlib logger.

    Silent unless enabled. When enabled, debug output goes to ``log_file``
    ("-" for stdout) or to logs/stylize_debug.log under the project root.
    """
    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            if log_file == "-":
                logging.basicConfig(level=logging.DEBUG, format=fmt, stream=sys.stdout)
            else:
                if log_file is None:
                    project_root = os.path.dirname(os.path.dirname(__file__))
                    os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                    log_file = os.path.join(project_root, 'logs', 'stylize_debug.log')
                logging.basicConfig(level=logging.DEBUG, format=fmt, filename=log_file)
        elif not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
