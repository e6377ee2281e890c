import os, sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            if log_file is None:
                os.makedirs(os.path.join(os.getcwd(), 'logs'), exist_ok=True)
                log_file = os.path.join(os.getcwd(), 'logs', 'termdown_debug.log')
            # Loggers are shared per name, so several instances must not stack handlers
            if not self._has_handler(log_file):
                handler = logging.StreamHandler(sys.stdout) if log_file == '-' else logging.FileHandler(log_file)
                handler.setFormatter(logging.Formatter(LOG_FORMAT))
                self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)
        elif not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _has_handler(self, log_file: str) -> bool:
        for handler in self._logger.handlers:
            if isinstance(handler, logging.FileHandler):
                if log_file != '-' and handler.baseFilename == os.path.abspath(log_file):
                    return True
            elif isinstance(handler, logging.StreamHandler):
                if log_file == '-' and handler.stream is sys.stdout:
                    return True
        return False

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
