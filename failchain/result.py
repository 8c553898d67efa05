from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import Validation

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")


class Result(Generic[E, A]):
    """Short-circuiting result whose error side keeps a link to earlier errors."""

    def is_ok(self) -> bool: raise NotImplementedError
    def is_err(self) -> bool: return not self.is_ok()

    @staticmethod
    def pure(value: A) -> "Result[Any, A]":
        return Ok(value)

    def map(self, f: Callable[[A], B]) -> "Result[E, B]":
        if self.is_ok():
            return Ok(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_err(self, f: Callable[[E], B]) -> "Result[B, A]":
        if self.is_err():
            return _rebuild(self.errors(), f)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def and_then(self, f: Callable[[A], "Result[E, B]"]) -> "Result[E, B]":
        if self.is_ok():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    flat_map = and_then

    def ap(self, rf: "Result[E, Callable[[A], B]]") -> "Result[E, B]":
        if rf.is_ok():
            return self.map(rf.value)  # type: ignore[attr-defined]
        if self.is_ok():
            return rf  # type: ignore[return-value]
        prev = self.previous  # type: ignore[attr-defined]
        return Errors(self.error, Errors(prev.error, rf) if prev is not None else rf)  # type: ignore[attr-defined,arg-type]

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_ok() else default  # type: ignore[attr-defined]

    def to_validation(self) -> "Validation[E, A]":
        from .validation import to_validation
        return to_validation(self)

    def map_k(self, fn: Callable[[A], B]) -> "Result[E, B]": return self.map(fn)
    def ap_k(self, lifted: "Result[E, Callable[[A], B]]") -> "Result[E, B]": return self.ap(lifted)
    def flat_map_k(self, fn: Callable[[A], "Result[E, B]"]) -> "Result[E, B]": return self.and_then(fn)


@dataclass(frozen=True)
class Ok(Result[E, A]):
    value: A
    def is_ok(self) -> bool: return True


@dataclass(frozen=True, eq=False, repr=False)
class Errors(Result[E, A]):
    error: E
    previous: Optional["Errors[E, Any]"] = None

    def __post_init__(self) -> None:
        if self.previous is not None and not isinstance(self.previous, Errors):
            raise TypeError(f"previous must be Errors or None, got {type(self.previous).__name__}")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.errors() == other.errors()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((Errors, tuple(self.errors())))

    def __repr__(self) -> str:
        return f"Errors(errors={self.errors()!r})"

    def is_ok(self) -> bool: return False

    def errors(self) -> List[E]:
        """All errors of the chain, oldest first."""
        out: List[E] = []
        node: Optional[Errors[E, Any]] = self
        while node is not None:
            out.append(node.error)
            node = node.previous
        out.reverse()
        return out


def _rebuild(errors: List[E], f: Callable[[E], B]) -> "Errors[B, Any]":
    node: Optional[Errors[B, Any]] = None
    for e in errors:
        node = Errors(f(e), node)
    return node  # type: ignore[return-value]


def from_errors(errors: List[E]) -> "Errors[E, Any]":
    """Build an ``Errors`` chain from a non-empty list, oldest first."""
    if not errors:
        raise ValueError("from_errors needs at least one error")
    return _rebuild(list(errors), lambda e: e)
