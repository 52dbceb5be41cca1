"""Attempt[T] — success/failure container for raising callables.

Usage::

    from attempted import Attempt

    attempt = Attempt.of(int, "42")              # Attempt(success=42)
    attempt = attempt.map(lambda n: n * 2)       # Attempt(success=84)
    attempt = attempt.assert_(
        lambda n: n > 100,
        lambda n: f"Value {n} was less than 100",
    )                                            # Attempt(failure=AttemptFailedError(...))

    attempt.is_failure()                         # True
    attempt.or_else(0)                           # 0
    attempt.or_throw(lambda e: f"Unable to parse: {e}")  # raises AttemptFailedError

Awaitables are handled too; await the attempt the way the call would be::

    attempt = await Attempt.of(fetch_user, user_id)
    attempt = await attempt.map(load_profile)     # async mapping function

A callable can be wrapped once and called later::

    @Attempt.wrap
    def parse(raw: str) -> int:
        return int(raw)

    parse("12").get()                            # 12
"""

from __future__ import annotations

import enum
import functools
import inspect
from typing import (
    Any,
    Awaitable,
    Callable,
    Generator,
    Generic,
    NoReturn,
    ParamSpec,
    TypeVar,
    overload,
)

from attempted.errors import AttemptFailedError, ContractViolationError

T = TypeVar("T")
R = TypeVar("R")
P = ParamSpec("P")

_CONSTRUCTOR_TOKEN: Any = object()


class _State(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"


def _restore(state: _State, payload: Any) -> Attempt[Any]:
    return Attempt(state, payload, _CONSTRUCTOR_TOKEN)


class Attempt(Generic[T]):
    """Immutable result of calling something that may raise.

    Holds either a success payload or a failure payload, never both and
    never neither. ``None`` is a valid payload on either side. Instances
    come from :meth:`of`, :meth:`wrap`, :meth:`from_value` and
    :meth:`from_error` only.
    """

    __slots__ = ("_payload", "_state")

    _state: _State
    _payload: Any

    def __init__(self, state: _State, payload: Any, token: object = None) -> None:
        if token is not _CONSTRUCTOR_TOKEN:
            raise TypeError(
                "Attempt instances are created with Attempt.of, Attempt.wrap, "
                "Attempt.from_value or Attempt.from_error"
            )
        object.__setattr__(self, "_state", state)
        object.__setattr__(self, "_payload", payload)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore, (self._state, self._payload))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @overload
    @classmethod
    def of(
        cls,
        fn: Callable[P, Attempt[R]],
        /,
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Attempt[R]: ...

    @overload
    @classmethod
    def of(
        cls,
        fn: Callable[P, Awaitable[Attempt[R]]],
        /,
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Awaitable[Attempt[R]]: ...

    @overload
    @classmethod
    def of(
        cls,
        fn: Callable[P, Awaitable[R]],
        /,
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Awaitable[Attempt[R]]: ...

    @overload
    @classmethod
    def of(
        cls,
        fn: Callable[P, R],
        /,
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Attempt[R]: ...

    @classmethod
    def of(cls, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Any:
        """Call ``fn(*args, **kwargs)`` and capture the outcome.

        * ``fn`` raises → failed attempt holding the exception.
        * ``fn`` returns an awaitable → a coroutine resolving to the
          attempt; nothing is raised until (and including) it is awaited.
          Like any coroutine it can be awaited once (``asyncio.run`` and
          ``asyncio.create_task`` accept it); keep the resulting attempt,
          or wrap it in a task, to read it more than once.
        * ``fn`` returns an :class:`Attempt` → that attempt, unchanged.
        * otherwise → successful attempt holding the return value.

        Only :class:`Exception` is captured. ``KeyboardInterrupt``,
        ``SystemExit`` and ``asyncio.CancelledError`` propagate.
        """
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            return cls.from_error(exc)

        # Attempts are awaitable themselves.
        if inspect.isawaitable(result) and not isinstance(result, Attempt):
            return cls._settle(result)
        return cls._adopt(result)

    @classmethod
    def wrap(cls, fn: Callable[P, Any]) -> Callable[P, Any]:
        """Return *fn* with every call routed through :meth:`of`.

        Signature and metadata are kept, so it works as a decorator. The
        wrapper of a coroutine function still reports as one.
        """

        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            return cls.of(fn, *args, **kwargs)

        if inspect.iscoroutinefunction(fn):
            inspect.markcoroutinefunction(wrapper)
        return wrapper

    @classmethod
    def from_value(cls, value: T | Attempt[T]) -> Attempt[T]:
        """Successful attempt holding *value*.

        A successful attempt is returned as is; a failed one is a
        :class:`ContractViolationError`.
        """
        if isinstance(value, Attempt):
            if value.is_failure():
                raise ContractViolationError(
                    f"Can not pass a failed attempt as the value: {value._payload}",
                    operation="from_value",
                    cause=_as_cause(value._payload),
                )
            return value
        return cls(_State.SUCCESS, value, _CONSTRUCTOR_TOKEN)

    @classmethod
    def from_error(cls, error: Any) -> Attempt[Any]:
        """Failed attempt holding *error*.

        A failed attempt is returned as is; a successful one is a
        :class:`ContractViolationError`.
        """
        if isinstance(error, Attempt):
            if error.is_success():
                raise ContractViolationError(
                    f"Can not pass a successful attempt as the error: {error._payload}",
                    operation="from_error",
                )
            return error
        return cls(_State.FAILURE, error, _CONSTRUCTOR_TOKEN)

    # ofValue / ofError spellings.
    of_value = from_value
    of_error = from_error

    @classmethod
    async def _settle(cls, awaitable: Awaitable[Any]) -> Attempt[Any]:
        try:
            result = await awaitable
        except Exception as exc:
            return cls.from_error(exc)
        return cls._adopt(result)

    @classmethod
    def _adopt(cls, result: Any) -> Attempt[Any]:
        if isinstance(result, Attempt):
            return result
        return cls.from_value(result)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get(self) -> T:
        """Return the value; raise :class:`ContractViolationError` on failure."""
        if self._state is _State.FAILURE:
            raise ContractViolationError(
                f"Getting value on failed attempt: {self._payload}",
                operation="get",
                cause=_as_cause(self._payload),
            )
        return self._payload

    def get_error(self) -> Any:
        """Return the error; raise :class:`ContractViolationError` on success."""
        if self._state is _State.SUCCESS:
            raise ContractViolationError(
                f"Getting error on success attempt: {self._payload}",
                operation="get_error",
            )
        return self._payload

    def or_else(self, default: T) -> T:
        if self._state is _State.FAILURE:
            return default
        return self._payload

    def or_throw(
        self,
        error_to_throw: BaseException | str | Callable[[Any], BaseException | str],
    ) -> T:
        """Return the value or raise.

        *error_to_throw* is an exception to raise, a message (raised as
        :class:`AttemptFailedError`), or a factory receiving the stored
        error and returning either of those. Exception classes count as
        factories: ``or_throw(ValueError)`` raises ``ValueError(error)``.
        """
        if self._state is _State.SUCCESS:
            return self._payload

        if isinstance(error_to_throw, (str, BaseException)):
            produced: Any = error_to_throw
        elif callable(error_to_throw):
            produced = error_to_throw(self._payload)
        else:
            produced = error_to_throw

        if isinstance(produced, str):
            produced = AttemptFailedError(produced)
        if not isinstance(produced, BaseException):
            raise ContractViolationError(
                "or_throw expects an exception, a message or a factory returning "
                f"one, got {type(produced).__name__}",
                operation="or_throw",
            )

        cause = _as_cause(self._payload)
        if cause is not None and produced is not cause:
            raise produced from cause
        raise produced

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------

    @overload
    def map(self, fn: Callable[[T], Attempt[R]]) -> Attempt[R]: ...

    @overload
    def map(self, fn: Callable[[T], Awaitable[Attempt[R]]]) -> Awaitable[Attempt[R]]: ...

    @overload
    def map(self, fn: Callable[[T], Awaitable[R]]) -> Awaitable[Attempt[R]]: ...

    @overload
    def map(self, fn: Callable[[T], R]) -> Attempt[R]: ...

    def map(self, fn: Callable[[T], Any]) -> Any:
        """Apply *fn* to the value through the same boundary as :meth:`of`.

        An awaitable result gives a single-use coroutine, as in :meth:`of`.
        A failed attempt is returned unchanged and *fn* is not called. It is
        returned synchronously even for an async *fn*; awaiting it gives the
        same attempt back, so ``await attempt.map(async_fn)`` always works.
        """
        if self._state is _State.FAILURE:
            return self
        return type(self).of(fn, self._payload)

    def assert_(
        self,
        predicate: Callable[[T], bool],
        error_factory: Callable[[T], Any],
    ) -> Attempt[T]:
        """Turn a successful attempt into a failure when *predicate* fails.

        The attempt itself is returned when it already failed (neither
        callable runs) or when *predicate* holds. Otherwise the result of
        ``error_factory(value)`` becomes the error; a message is wrapped in
        :class:`AttemptFailedError`.
        """
        if self._state is _State.FAILURE:
            return self
        if predicate(self._payload):
            return self

        error = error_factory(self._payload)
        if isinstance(error, str):
            error = AttemptFailedError(error)
        return type(self).from_error(error)

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def is_success(self) -> bool:
        return self._state is _State.SUCCESS

    def is_failure(self) -> bool:
        return self._state is _State.FAILURE

    def if_success(self, fn: Callable[[T], Any]) -> None:
        if self._state is _State.SUCCESS:
            fn(self._payload)

    def if_failure(self, fn: Callable[[Any], Any]) -> None:
        if self._state is _State.FAILURE:
            fn(self._payload)

    def if_else(
        self,
        success_fn: Callable[[T], Any],
        failure_fn: Callable[[Any], Any],
    ) -> None:
        if self._state is _State.SUCCESS:
            success_fn(self._payload)
        else:
            failure_fn(self._payload)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attempt):
            return NotImplemented
        return self._state is other._state and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((self._state, self._payload))

    def __repr__(self) -> str:
        return f"Attempt({self._state.value}={self._payload!r})"

    def __await__(self) -> Generator[Any, None, Attempt[T]]:
        """Awaiting a settled attempt returns the attempt itself."""
        return self
        yield  # unreachable; turns this into a generator


def _as_cause(payload: Any) -> BaseException | None:
    return payload if isinstance(payload, BaseException) else None


__all__ = ["Attempt"]
