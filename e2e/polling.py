"""RetryPoller — drive an async predicate to an outcome with bounded attempts."""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

Predicate = Callable[[], Awaitable[Any]]
Sleep = Callable[[float], Awaitable[Any]]


class InvalidConfiguration(ValueError):
    """Raised when a PollConfig cannot drive a polling session."""
    pass


class PollStatus(Enum):
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"
    FAULTED = "faulted"


@dataclass(frozen=True)
class PollOutcome:
    """Terminal result of one poll() call."""

    status: PollStatus
    attempts: int
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.status is PollStatus.SUCCEEDED

    @property
    def exhausted(self) -> bool:
        return self.status is PollStatus.EXHAUSTED

    @property
    def faulted(self) -> bool:
        return self.status is PollStatus.FAULTED


@dataclass(frozen=True)
class PollConfig:
    """Attempt budget and fixed delay for a polling session."""

    max_attempts: int = 5
    retry_delay: float = 1.0  # seconds, fixed between attempts

    def __post_init__(self):
        self.validate()

    def validate(self):
        # bool is an int subclass; True would silently mean one attempt
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise InvalidConfiguration(
                f"max_attempts must be an integer, got {self.max_attempts!r}"
            )
        if self.max_attempts < 1:
            raise InvalidConfiguration(
                f"max_attempts must be >= 1, got {self.max_attempts}"
            )
        if isinstance(self.retry_delay, bool) or not isinstance(self.retry_delay, (int, float)):
            raise InvalidConfiguration(
                f"retry_delay must be a number, got {self.retry_delay!r}"
            )
        if self.retry_delay < 0:
            raise InvalidConfiguration(
                f"retry_delay must be >= 0, got {self.retry_delay}"
            )


async def poll(
    predicate: Predicate,
    config: Optional[PollConfig] = None,
    *,
    sleep: Sleep = asyncio.sleep,
    log: Optional[logging.Logger] = None,
) -> PollOutcome:
    """Evaluate ``predicate`` until it is truthy or the attempt budget runs out.

    Errors raised by the predicate count as failed attempts and are retried.
    When the budget is spent, the last attempt decides the outcome: an error
    gives FAULTED (carrying that error), a falsy result gives EXHAUSTED.
    The delay is applied only between attempts.
    """
    config = config or PollConfig()
    config.validate()
    log = log or logger

    last_error: Optional[Exception] = None
    for attempt in range(1, config.max_attempts + 1):
        try:
            result = await predicate()
        except Exception as e:
            last_error = e
            log.warning(f"Attempt {attempt}/{config.max_attempts} failed: {e}")
        else:
            last_error = None
            if result:
                log.debug(f"Condition met after {attempt} attempt(s)")
                return PollOutcome(PollStatus.SUCCEEDED, attempt)

        if attempt < config.max_attempts:
            await sleep(config.retry_delay)

    if last_error is not None:
        log.debug(f"Condition faulted after {config.max_attempts} attempt(s)")
        return PollOutcome(PollStatus.FAULTED, config.max_attempts, last_error)

    log.debug(f"Condition not met after {config.max_attempts} attempt(s)")
    return PollOutcome(PollStatus.EXHAUSTED, config.max_attempts)
