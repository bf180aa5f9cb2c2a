from __future__ import annotations

import datetime
import io
import os
import pathlib
import sys
import threading
from typing import (
    Callable,
    Dict,
    TypeVar,
)

import msgspec

from rendezvous.logging.config import LoggingConfig, StreamType
from rendezvous.logging.models import Entry, Log, LogLevel

T = TypeVar('T', bound=Entry)


DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"
ERROR_TEMPLATE = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"


class LoggerStream:
    """
    Synchronous, thread-safe log stream.

    Entries below the configured level (or for a disabled logger name) are
    dropped. Enabled entries are rendered with the template to stdout/stderr,
    or appended as one JSON-encoded Log per line when a file path is set.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
    ) -> None:
        if name is None:
            name = 'default'

        self._name = name
        self._default_template = template
        self._default_logfile_path: str | None = None

        if path:
            self._default_logfile_path = self._to_logfile_path(path)

        self._config = LoggingConfig()
        self._files: Dict[str, io.BufferedWriter] = {}
        self._write_lock = threading.Lock()

    @property
    def name(self):
        return self._name

    def enabled(self, entry: Entry) -> bool:
        return self.enabled_at(entry.level)

    def enabled_at(self, level: LogLevel) -> bool:
        return self._config.enabled(self._name, level)

    def log(
        self,
        entry: T,
        template: str | None = None,
        path: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if self.enabled(entry) is False:
            return

        if filter and filter(entry) is False:
            return

        logfile_path = self._default_logfile_path
        if path:
            logfile_path = self._to_logfile_path(path)

        if template is None:
            template = self._default_template

        if logfile_path:
            self._log_to_file(
                entry,
                logfile_path,
            )

        else:
            self._log(
                entry,
                template=template,
            )

    def _log(
        self,
        entry: Entry,
        template: str | None = None,
    ):
        if template is None:
            template = DEFAULT_TEMPLATE

        log_file, line_number, function_name = self._find_caller()

        stream = sys.stdout if self._config.output == StreamType.STDOUT else sys.stderr

        try:
            line = entry.to_template(
                template,
                context={
                    "filename": log_file,
                    "function_name": function_name,
                    "line_number": line_number,
                    "thread_id": threading.get_native_id(),
                    "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
                },
            )

            with self._write_lock:
                stream.write(line + "\n")
                stream.flush()

        except (KeyError, IndexError, ValueError, OSError) as err:
            self._report_error(
                entry,
                err,
                log_file,
                function_name,
                line_number,
            )

    def _log_to_file(
        self,
        entry: Entry,
        logfile_path: str,
    ):
        log_file, line_number, function_name = self._find_caller()

        log = Log(
            entry=entry,
            logger=self._name,
            filename=log_file,
            function_name=function_name,
            line_number=line_number,
        )

        try:
            with self._write_lock:
                logfile = self._files.get(logfile_path)
                if logfile is None or logfile.closed:
                    logfile = self._open_file(logfile_path)

                logfile.write(msgspec.json.encode(log) + b"\n")
                logfile.flush()

        except OSError as err:
            self._report_error(
                entry,
                err,
                log_file,
                function_name,
                line_number,
            )

    def _open_file(self, logfile_path: str) -> io.BufferedWriter:
        directory = os.path.dirname(logfile_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        logfile = open(logfile_path, 'ab')
        self._files[logfile_path] = logfile

        return logfile

    def _report_error(
        self,
        entry: Entry,
        err: Exception,
        log_file: str,
        function_name: str,
        line_number: int,
    ):
        if sys.stderr is None or sys.stderr.closed:
            return

        sys.stderr.write(
            entry.to_template(
                ERROR_TEMPLATE,
                context={
                    "filename": log_file,
                    "function_name": function_name,
                    "line_number": line_number,
                    "error": str(err),
                    "thread_id": threading.get_native_id(),
                    "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
                },
            )
            + "\n"
        )

    def close(self):
        with self._write_lock:
            for logfile in self._files.values():
                if logfile.closed is False:
                    logfile.close()

            self._files.clear()

    def _to_logfile_path(self, path: str) -> str:
        logfile_path = pathlib.Path(path)
        is_logfile = len(logfile_path.suffix) > 0

        if is_logfile:
            return str(logfile_path.absolute())

        return str(logfile_path.absolute() / f"{self._name}.log.json")

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(3)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )
