# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
A small `Result` type inspired by Rust, used on the decoding path.

Decoders return `Ok(value)` or `Err(error)` instead of raising, so nested decoders can be composed and the first
failure travels outward unchanged. Inside a function decorated with `@propagate_result`, calling
`unwrap_or_propagate()` on an `Err` returns that `Err` from the decorated function immediately:

>>> @propagate_result
... def add_one(r: Result[int, str]) -> Result[int, str]:
...     value = r.unwrap_or_propagate()
...     return Ok(value + 1)
>>> add_one(Ok(1))
Ok(2)
>>> add_one(Err('bad'))
Err('bad')
"""

from __future__ import annotations

import functools
import inspect
import os
import traceback
from typing import Any, Callable, Final, Generic, Literal, NoReturn, ParamSpec, Type, TypeAlias, TypeVar

T = TypeVar('T', covariant=True)  # Success type
E = TypeVar('E', covariant=True)  # Error type
U = TypeVar('U')
F = TypeVar('F')
P = ParamSpec('P')
TE = TypeVar('TE', bound=Exception)

_PACKAGE_DIR: Final = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Ok(Generic[T]):
    """
    A value that indicates success and which stores arbitrary data for the return value.
    """

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Ok({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def __ne__(self, other: Any) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash((True, self._value))

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def ok(self) -> T:
        return self._value

    def err(self) -> None:
        return None

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, 'Called `Result.unwrap_err()` on an `Ok` value')

    def unwrap_or(self, _default: U) -> T:
        return self._value

    def unwrap_or_raise(self) -> T:
        return self._value

    def unwrap_or_propagate(self) -> T:
        return self._value

    def map(self, op: Callable[[T], U]) -> Ok[U]:
        """
        Return `Ok` with the value mapped by `op`.
        """
        return Ok(op(self._value))

    def map_err(self, _op: Callable[[E], F]) -> Ok[T]:
        return self

    def and_then(self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Chain another fallible operation on the contained value.
        """
        return op(self._value)

    def inspect(self, op: Callable[[T], Any]) -> Result[T, E]:
        """
        Call `op` with the contained value and return the original result.
        """
        op(self._value)
        return self


class Err(Generic[E]):
    """
    A value that signifies failure and which stores arbitrary data for the error.
    """

    __slots__ = ('_value', 'traceback')
    __match_args__ = ('_value',)

    def __init__(self, value: E, cause: Exception | None = None) -> None:
        self._value = value
        self.traceback: str | None

        if cause is not None:
            # when a cause is provided, we use it.
            assert cause.__traceback__ is not None, 'cause must only be used from a try-except context'
            if isinstance(value, BaseException):
                value.__cause__ = cause
            self.traceback = ''.join(traceback.format_exception(cause))
            return

        if not isinstance(value, Exception):
            self.traceback = None
            return

        if value.__traceback__ is not None:
            self.traceback = ''.join(traceback.format_exception(value))
            return

        # when value is an exception without a traceback, we have to capture it ourselves.
        self.traceback = self._capture_traceback(value)

    @staticmethod
    def _capture_traceback(e: Exception) -> str:
        """
        Capture the current call stack as a traceback string, keeping only the frames inside this package.
        """
        # drop Err.__init__ and Err._capture_traceback
        stack = traceback.extract_stack()[:-2]
        frames = [frame for frame in stack if frame.filename.startswith(_PACKAGE_DIR)]
        tb_lines = ['Traceback (most recent call last):\n']
        tb_lines.extend(traceback.format_list(frames))
        tb_lines.append(f'{type(e).__module__}:{type(e).__qualname__}: {e}\n')
        return ''.join(tb_lines)

    def __repr__(self) -> str:
        return f'Err({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Err) and self._value == other._value

    def __ne__(self, other: Any) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash((False, self._value))

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def ok(self) -> None:
        return None

    def err(self) -> E:
        return self._value

    def unwrap(self) -> NoReturn:
        exc = UnwrapError(self, f'Called `Result.unwrap()` on an `Err` value: {self._value!r}')
        if isinstance(self._value, BaseException):
            raise exc from self._value
        raise exc

    def unwrap_err(self) -> E:
        return self._value

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_raise(self) -> NoReturn:
        """
        Raise the contained exception.
        """
        assert isinstance(self._value, Exception), (
            f'called `Result.unwrap_or_raise()` on non-exception value: {self._value}'
        )
        raise self._value

    def unwrap_or_propagate(self) -> NoReturn:
        """
        Return this `Err` from the enclosing function decorated with `@propagate_result`.
        """
        raise _ResultPropagationException(self)

    def map(self, _op: Callable[[T], U]) -> Err[E]:
        return self

    def map_err(self, op: Callable[[E], F]) -> Err[F]:
        """
        Return `Err` with the error mapped by `op`.
        """
        return Err(op(self._value))

    def and_then(self, _op: Callable[[T], Result[U, E]]) -> Err[E]:
        return self

    def inspect(self, op: Callable[[T], Any]) -> Result[T, E]:
        return self


Result: TypeAlias = Ok[T] | Err[E]


class UnwrapError(Exception):
    """
    Exception raised from `.unwrap_*` calls. The original `Result` is available as `.result`.
    """

    _result: Result[Any, Any]

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        super().__init__(message)
        self._result = result

    @property
    def result(self) -> Result[Any, Any]:
        return self._result


class _ResultPropagationException(Exception):
    def __init__(self, err: Err[E]) -> None:
        super().__init__('did you forget to annotate the function/method with `@propagate_result`?')
        self.err = err


def propagate_result(f: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
    """
    Decorator to turn a function into one that allows using unwrap_or_propagate.
    """
    @functools.wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        try:
            return f(*args, **kwargs)
        except _ResultPropagationException as e:
            return e.err  # type: ignore[return-value]

    return wrapper


def as_result(
    *exceptions: Type[TE],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, TE]]]:
    """
    Make a decorator to turn a function into one that returns a `Result`.

    Regular return values are turned into `Ok(return_value)`. Raised exceptions of the specified exception type(s) are
    turned into `Err(exc)`.
    """
    if not exceptions or not all(
        inspect.isclass(exception) and issubclass(exception, BaseException)
        for exception in exceptions
    ):
        raise TypeError('as_result() requires one or more exception types')

    def decorator(f: Callable[P, T]) -> Callable[P, Result[T, TE]]:
        @functools.wraps(f)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, TE]:
            try:
                return Ok(f(*args, **kwargs))
            except exceptions as exc:
                return Err(exc)

        return wrapper

    return decorator
