from __future__ import annotations
from pydantic import BaseModel, StrictStr
from typing import Callable, Dict, Literal, Union

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    RENDEZVOUS_HASHER: Literal["fnv1a", "xxhash", "sha256"] = "fnv1a"
    RENDEZVOUS_LOG_LEVEL: Literal[
        "trace", "debug", "info", "warn", "error", "critical", "fatal"
    ] = "info"
    RENDEZVOUS_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    RENDEZVOUS_LOG_PATH: StrictStr | None = None

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "RENDEZVOUS_HASHER": str,
            "RENDEZVOUS_LOG_LEVEL": str,
            "RENDEZVOUS_LOG_OUTPUT": str,
            "RENDEZVOUS_LOG_PATH": str,
        }
