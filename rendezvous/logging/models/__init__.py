from .log_level import LogLevel as LogLevel, LogLevelName as LogLevelName
from .entry import Entry as Entry
from .log import Log as Log
