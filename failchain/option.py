from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import Validation

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Generic[T]):
    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    @staticmethod
    def pure(value: T) -> "Option[T]":
        return Some(value)

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE  # type: ignore[return-value]

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE  # type: ignore[return-value]

    def ap(self, of: "Option[Callable[[T], U]]") -> "Option[U]":
        if of.is_some():
            return self.map(of.value)  # type: ignore[attr-defined]
        return NONE  # type: ignore[return-value]

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    def to_validation(self, on_none: Callable[[], E]) -> "Validation[E, T]":
        from .validation import Fail, Success
        if self.is_some():
            return Success(self.value)  # type: ignore[attr-defined]
        return Fail(on_none())

    def map_k(self, fn: Callable[[T], U]) -> "Option[U]": return self.map(fn)
    def ap_k(self, lifted: "Option[Callable[[T], U]]") -> "Option[U]": return self.ap(lifted)
    def flat_map_k(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]": return self.flat_map(fn)


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True


class _None(Option[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "None"
    def is_some(self) -> bool: return False


NONE: Option[Any] = _None()


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE
