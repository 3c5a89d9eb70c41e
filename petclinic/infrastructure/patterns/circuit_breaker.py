"""Circuit breaker pattern for resilient upstream service calls.

This module implements the circuit breaker pattern to prevent cascading
failures when calling upstream services. It monitors failures and
temporarily halts requests to failing services, substituting a fallback
value, and allowing them time to recover.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import pybreaker
from pybreaker import CircuitBreaker, CircuitBreakerError

from petclinic.infrastructure.logging.config import get_logger


T = TypeVar("T")


logger = get_logger(__name__)


class CircuitBreakerService:
    """Registry of named circuit breakers shared across concurrent requests.

    The circuit breaker pattern prevents cascading failures by:
    1. Counting consecutive failures of a protected call
    2. Opening the circuit (skipping the call) when the threshold is reached
    3. Letting a trial call through after the reset timeout (half-open)
    4. Closing the circuit again once enough trial calls succeed

    Circuit States:
        - Closed: Normal operation, calls pass through
        - Open: Too many failures, calls are skipped and the fallback is used
        - Half-Open: Testing recovery, a trial call decides the next state
    """

    def __init__(
        self,
        fail_max: int = 5,
        reset_timeout: float = 30.0,
        success_threshold: int = 1,
    ) -> None:
        """Initialize the registry with the default breaker policy.

        Args:
            fail_max: Consecutive failures before a circuit opens
            reset_timeout: Seconds a circuit stays open before a trial call
            success_threshold: Successful trial calls needed to close a circuit
        """
        self._breakers: dict[str, CircuitBreaker] = {}
        self._trials: dict[str, asyncio.Lock] = {}
        self._fail_max = fail_max
        self._reset_timeout = reset_timeout
        self._success_threshold = success_threshold

    def get_breaker(
        self,
        name: str,
        fail_max: int | None = None,
        reset_timeout: float | None = None,
        success_threshold: int | None = None,
    ) -> CircuitBreaker:
        """Get or create the circuit breaker registered under ``name``.

        Policy arguments only apply when the breaker is first created;
        later lookups return the existing shared instance unchanged.

        Args:
            name: Unique identifier for the circuit breaker
            fail_max: Override for the consecutive failure threshold
            reset_timeout: Override for the open-state duration in seconds
            success_threshold: Override for the half-open trial count

        Returns:
            Circuit breaker instance for the name
        """
        if name not in self._breakers:
            breaker = CircuitBreaker(
                fail_max=fail_max or self._fail_max,
                reset_timeout=reset_timeout or self._reset_timeout,
                success_threshold=success_threshold or self._success_threshold,
                name=name,
                listeners=[self._create_listener(name)],
            )
            self._breakers[name] = breaker
            logger.info(
                "circuit_breaker_created",
                name=name,
                fail_max=breaker.fail_max,
                reset_timeout=breaker.reset_timeout,
                success_threshold=breaker.success_threshold,
            )
        return self._breakers[name]

    def _create_listener(self, name: str) -> pybreaker.CircuitBreakerListener:
        """Create event listener for circuit breaker monitoring.

        Args:
            name: Circuit breaker name for logging context

        Returns:
            Circuit breaker listener that logs state changes and failures
        """

        class LoggingListener(pybreaker.CircuitBreakerListener):
            """Logs circuit breaker state transitions and call outcomes."""

            def state_change(self, cb: CircuitBreaker, old_state: Any, new_state: Any) -> None:
                logger.warning(
                    "circuit_breaker_state_change",
                    breaker=name,
                    old_state=old_state.name if old_state else None,
                    new_state=new_state.name,
                )

            def failure(self, cb: CircuitBreaker, exc: BaseException) -> None:
                logger.warning(
                    "circuit_breaker_failure",
                    breaker=name,
                    error=str(exc),
                    error_type=type(exc).__name__,
                    failure_count=cb.fail_counter,
                )

            def success(self, cb: CircuitBreaker) -> None:
                logger.debug("circuit_breaker_success", breaker=name)

        return LoggingListener()

    def get_state(self, name: str) -> str | None:
        """Return the current state of a breaker ("closed", "open", "half-open").

        Args:
            name: Circuit breaker name

        Returns:
            State name, or None if no breaker with that name exists yet
        """
        breaker = self._breakers.get(name)
        return breaker.current_state if breaker else None

    async def run(
        self,
        breaker_name: str,
        operation: Callable[[], Awaitable[T]],
        fallback: Callable[[Exception], T],
    ) -> T:
        """Run an async operation under a named breaker, substituting a fallback.

        - Closed circuit, operation succeeds: its value is returned.
        - Closed circuit, operation fails: the failure is recorded and the
          fallback value is returned.
        - Open circuit: the operation is not started; the fallback value is
          returned.
        - Half-open circuit: the operation runs as a trial; success closes the
          circuit, failure opens it again. Either way the caller gets a value.
          While a trial is in flight, concurrent callers get the fallback
          without starting the operation.

        Cancellation of the calling task is never turned into a fallback.

        Args:
            breaker_name: Name of the shared circuit breaker to use
            operation: Zero-argument factory for the protected awaitable
            fallback: Builds the substitute value from the failure

        Returns:
            The operation's result or the fallback value
        """
        breaker = self.get_breaker(breaker_name)
        if breaker.current_state == pybreaker.STATE_CLOSED:
            return await self._call(breaker_name, breaker, operation, fallback)

        # Outside the closed state only one call per breaker may be in flight.
        trial = self._trials.setdefault(breaker_name, asyncio.Lock())
        if trial.locked():
            error = CircuitBreakerError("Trial call already in progress")
            logger.warning(
                "circuit_breaker_fallback",
                breaker=breaker_name,
                state=breaker.current_state,
                reason=str(error),
            )
            return fallback(error)
        async with trial:
            return await self._call(breaker_name, breaker, operation, fallback)

    async def _call(
        self,
        breaker_name: str,
        breaker: CircuitBreaker,
        operation: Callable[[], Awaitable[T]],
        fallback: Callable[[Exception], T],
    ) -> T:
        try:
            with breaker.calling():
                return await operation()
        except CircuitBreakerError as e:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise asyncio.CancelledError from e
            logger.warning(
                "circuit_breaker_fallback",
                breaker=breaker_name,
                state=breaker.current_state,
                reason=str(e),
            )
            return fallback(e)
        except Exception as e:
            logger.warning(
                "circuit_breaker_fallback",
                breaker=breaker_name,
                state=breaker.current_state,
                reason=str(e),
                error_type=type(e).__name__,
            )
            return fallback(e)
