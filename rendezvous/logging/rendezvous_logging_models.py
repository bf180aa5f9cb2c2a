from .models import Entry, LogLevel


class NodeAdded(Entry, kw_only=True):
    node: str
    weight: float
    node_hash: int
    level: LogLevel = LogLevel.DEBUG

class NodeWeightUpdated(Entry, kw_only=True):
    node: str
    previous_weight: float
    weight: float
    level: LogLevel = LogLevel.DEBUG

class NodeRemoved(Entry, kw_only=True):
    node: str
    weight: float
    level: LogLevel = LogLevel.DEBUG

class RingCleared(Entry, kw_only=True):
    removed: int
    level: LogLevel = LogLevel.DEBUG

class KeyLookup(Entry, kw_only=True):
    key: str | bytes
    key_hash: int
    candidates: int
    level: LogLevel = LogLevel.TRACE
