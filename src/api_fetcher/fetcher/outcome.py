"""
Per-attempt results and per-call retry state.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..exceptions import ApiFetcherError


class OutcomeKind(str, Enum):
    """Classification of a single transport attempt."""

    SUCCESS = "success"
    NETWORK = "network"  # non-2xx, connection failure, anything unrecognized
    TIMEOUT = "timeout"
    PARSE = "parse"  # 2xx with an undecodable body

    @property
    def retryable(self) -> bool:
        return self in (OutcomeKind.NETWORK, OutcomeKind.TIMEOUT)


@dataclass(frozen=True)
class AttemptOutcome:
    """Tagged result of one attempt: a value on success, an error otherwise."""

    kind: OutcomeKind
    value: Any = None
    error: ApiFetcherError | None = None

    @classmethod
    def success(cls, value: Any) -> "AttemptOutcome":
        return cls(kind=OutcomeKind.SUCCESS, value=value)

    @classmethod
    def failure(cls, kind: OutcomeKind, error: ApiFetcherError) -> "AttemptOutcome":
        return cls(kind=kind, error=error)


@dataclass
class FetchAttempt:
    """Retry state owned by a single fetch_data call."""

    index: int = 0
    last_error: ApiFetcherError | None = None
    started_at: float = field(default_factory=time.monotonic)

    @property
    def elapsed_ms(self) -> float:
        return (time.monotonic() - self.started_at) * 1000
