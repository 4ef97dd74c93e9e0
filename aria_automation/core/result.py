"""Result types for railway-oriented programming.

Every fallible call in this package returns a Result instead of raising.
Callers branch on the variant (and on the error type it carries), which
keeps retry decisions such as the alternate login payload explicit.

Usage:
    result = await negotiator.negotiate(credential, "vra.example.com")
    match result:
        case Success(value=session):
            store.set(session)
        case Failure(error=AuthRejectedError() as error):
            print(error.hint)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
