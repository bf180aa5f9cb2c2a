import threading
from typing import List, Literal

from rendezvous.logging.models import LogLevel, LogLevelName
from .log_level_map import LogLevelMap
from .stream_type import StreamType


LogOutput = Literal['stdout', 'stderr']


class LoggingConfig:
    """
    Process-wide logging settings.

    Rings are shared between threads, so the level, output and disabled
    loggers are held on the class and read by every thread. Updates are
    serialized with a lock.
    """

    _lock = threading.Lock()
    _log_level: LogLevel = LogLevel.INFO
    _log_output_type: StreamType = StreamType.STDOUT
    _disabled_loggers: tuple[str, ...] = ()
    _level_map = LogLevelMap()

    def update(
        self,
        log_level: LogLevelName | None = None,
        log_output: LogOutput | None = None,
        disabled_loggers: List[str] | None = None,
    ):
        level: LogLevel | None = None
        if log_level:
            level = LogLevel.to_level(log_level)
            if level is None:
                raise ValueError(f"Unknown log level {log_level!r}")

        config = type(self)
        with config._lock:
            if level is not None:
                config._log_level = level

            if log_output:
                config._log_output_type = (
                    StreamType.STDOUT if log_output == 'stdout' else StreamType.STDERR
                )

            if disabled_loggers is not None:
                config._disabled_loggers = tuple(disabled_loggers)

    def enabled(self, logger_name: str, log_level: LogLevel) -> bool:
        return logger_name not in self._disabled_loggers and (
            self._level_map.at_least(log_level, self._log_level)
        )

    @property
    def level(self):
        return self._log_level

    @property
    def output(self):
        return self._log_output_type
