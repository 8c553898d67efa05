"""Failure-accumulating validation.

``Validation`` is either a ``Success`` holding a value or a ``Fail`` holding
the newest failure plus a link to the ``Fail`` it was merged on top of.

``map``/``flat_map`` stop at the first failure. ``ap`` (and everything built
on it: ``map2``, ``combine``, ``flatten``, ``traverse``) evaluates both sides
and keeps the failures of both.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from . import kind
from .exceptions import FailedExtraction
from .logger import ConsoleLogger, default_logger
from .result import Errors, Ok, Result

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


class Validation(Generic[E, A]):
    def is_success(self) -> bool: raise NotImplementedError
    def is_fail(self) -> bool: return not self.is_success()

    @staticmethod
    def pure(value: A) -> "Validation[Any, A]":
        return Success(value)

    def get(self) -> A:
        if self.is_success():
            return self.value  # type: ignore[attr-defined]
        raise FailedExtraction(self.failure)  # type: ignore[attr-defined]

    def map(self, f: Callable[[A], B]) -> "Validation[E, B]":
        return self.flat_map(lambda v: Success(f(v)))

    def flat_map(self, f: Callable[[A], "Validation[E, B]"]) -> "Validation[E, B]":
        if self.is_success():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    bind = flat_map

    def ap(self, vf: "Validation[E, Callable[[A], B]]") -> "Validation[E, B]":
        if vf.is_success():
            return self.map(vf.value)  # type: ignore[attr-defined]
        if self.is_success():
            return vf  # type: ignore[return-value]
        # Only the immediate parent of self is carried over; anything older
        # on this side is not part of the merged chain.
        prev = self.previous  # type: ignore[attr-defined]
        return Fail(self.failure, Fail(prev.failure, vf) if prev is not None else vf)  # type: ignore[attr-defined,arg-type]

    def combine(self, other: "Validation[E, B]") -> "Validation[E, Tuple[A, B]]":
        return map2(self, other, lambda a, b: (a, b))

    def map_fail(self, f: Callable[[E], D]) -> "Validation[D, A]":
        if self.is_fail():
            return self.transform(f)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_all_failures(self, f: Callable[[List[E]], D]) -> "Validation[D, A]":
        if self.is_fail():
            return Fail(f(self.failures()))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def if_fail(self, default: A) -> A:
        return self.value if self.is_success() else default  # type: ignore[attr-defined]

    def if_fail_with(self, handler: Callable[[List[E]], A]) -> A:
        if self.is_success():
            return self.value  # type: ignore[attr-defined]
        return handler(self.failures())  # type: ignore[attr-defined]

    def log_failures(self, logger: Optional[ConsoleLogger] = None, msg: str = "validation failed", level: str = "WARN") -> "Validation[E, A]":
        """Log every accumulated failure, oldest first, and pass ``self`` through."""
        if self.is_fail():
            log = logger or default_logger()
            log.failures(self.failures(), msg=msg, level=level)  # type: ignore[attr-defined]
        return self

    def to_result(self) -> Result[E, A]:
        if self.is_success():
            return Ok(self.value)  # type: ignore[attr-defined]
        node: Optional[Errors[E, A]] = None
        for f in self.failures():  # type: ignore[attr-defined]
            node = Errors(f, node)
        return node  # type: ignore[return-value]

    def map_k(self, fn: Callable[[A], B]) -> "Validation[E, B]": return self.map(fn)
    def ap_k(self, lifted: "Validation[E, Callable[[A], B]]") -> "Validation[E, B]": return self.ap(lifted)
    def flat_map_k(self, fn: Callable[[A], "Validation[E, B]"]) -> "Validation[E, B]": return self.flat_map(fn)


@dataclass(frozen=True)
class Success(Validation[E, A]):
    value: A
    def is_success(self) -> bool: return True


# eq/hash/repr walk the chain in a loop; the generated ones recurse per node.
@dataclass(frozen=True, eq=False, repr=False)
class Fail(Validation[E, A]):
    failure: E
    previous: Optional["Fail[E, Any]"] = None

    def __post_init__(self) -> None:
        if self.previous is not None and not isinstance(self.previous, Fail):
            raise TypeError(f"previous must be Fail or None, got {type(self.previous).__name__}")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.failures() == other.failures()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((Fail, tuple(self.failures())))

    def __repr__(self) -> str:
        return f"Fail(failures={self.failures()!r})"

    def is_success(self) -> bool: return False

    def failures(self) -> List[E]:
        """All failures of the chain, oldest first, ending with ``self.failure``."""
        out: List[E] = []
        node: Optional[Fail[E, Any]] = self
        while node is not None:
            out.append(node.failure)
            node = node.previous
        out.reverse()
        return out

    def transform(self, f: Callable[[E], D]) -> "Fail[D, A]":
        node: Optional[Fail[D, A]] = None
        for failure in self.failures():
            node = Fail(f(failure), node)
        return node  # type: ignore[return-value]


def success(value: A) -> Success[Any, A]:
    return Success(value)


def fail(failure: E) -> Fail[E, Any]:
    return Fail(failure)


pure = success


def map2(a: Validation[E, A], b: Validation[E, B], f: Callable[[A, B], C]) -> Validation[E, C]:
    return b.ap(a.map(lambda x: lambda y: f(x, y)))


def flatten(items: Iterable[Validation[E, A]]) -> Validation[E, Tuple[A, ...]]:
    return kind.flatten(items, pure)  # type: ignore[return-value]


def traverse(items: Iterable[A], f: Callable[[A], Validation[E, B]]) -> Validation[E, Tuple[B, ...]]:
    return kind.traverse(items, f, pure)  # type: ignore[return-value]


def to_validation(r: Result[E, A]) -> Validation[E, A]:
    if r.is_ok():
        return Success(r.value)  # type: ignore[attr-defined]
    node: Optional[Fail[E, A]] = None
    for e in r.errors():  # type: ignore[attr-defined]
        node = Fail(e, node)
    return node  # type: ignore[return-value]


def if_errors(r: Result[Any, A], transform: Callable[[Errors[Any, A]], E]) -> Validation[E, A]:
    if r.is_ok():
        return Success(r.value)  # type: ignore[attr-defined]
    return Fail(transform(r))  # type: ignore[arg-type]


def if_null_validation(value: Optional[A], on_none: Callable[[], E]) -> Validation[E, A]:
    if value is not None:
        return Success(value)
    return Fail(on_none())
