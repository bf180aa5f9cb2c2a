from .models import (
    Entry as Entry,
    Log as Log,
    LogLevel as LogLevel,
    LogLevelName as LogLevelName,
)
from .config import (
    LoggingConfig as LoggingConfig,
    LogOutput as LogOutput,
    StreamType as StreamType,
)
from .streams import LoggerStream as LoggerStream
from .rendezvous_logging_models import (
    KeyLookup as KeyLookup,
    NodeAdded as NodeAdded,
    NodeRemoved as NodeRemoved,
    NodeWeightUpdated as NodeWeightUpdated,
    RingCleared as RingCleared,
)
