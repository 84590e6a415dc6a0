"""
Pipeline result types - Explicit success/failure return values.

The registration pipeline reports expected failures as values instead of
raising. Each stage returns either ``Ok(value)`` or ``Err(error)`` and the
orchestrator stops at the first ``Err``.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful stage outcome carrying the produced value."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed stage outcome carrying a typed domain error."""

    error: E


Result = Ok[T] | Err[E]
