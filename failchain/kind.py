from __future__ import annotations
from typing import Any, Callable, Iterable, Protocol, Tuple, TypeVar, runtime_checkable

A = TypeVar("A")
B = TypeVar("B")
A_co = TypeVar("A_co", covariant=True)


# Capability tags. A container has a capability by providing the method,
# nothing here is meant to be inherited for behaviour.

@runtime_checkable
class Functor(Protocol[A_co]):
    def map_k(self, fn: Callable[[Any], B]) -> "Functor[B]": ...


@runtime_checkable
class ApplicativeFunctor(Functor[A_co], Protocol[A_co]):
    def ap_k(self, lifted: Functor[Callable[[Any], B]]) -> "ApplicativeFunctor[B]": ...


@runtime_checkable
class Monad(ApplicativeFunctor[A_co], Protocol[A_co]):
    def flat_map_k(self, fn: Callable[[Any], "Monad[B]"]) -> "Monad[B]": ...


def _append(acc: Tuple[A, ...]) -> Callable[[A], Tuple[A, ...]]:
    return lambda x: acc + (x,)


def flatten(items: Iterable[ApplicativeFunctor[A]], pure: Callable[[Tuple[()]], ApplicativeFunctor[Tuple[()]]]) -> ApplicativeFunctor[Tuple[A, ...]]:
    """Turn a sequence of containers into a container of a tuple.

    Elements are combined left to right with ``ap_k`` so the container's own
    combination policy decides what happens to failures.
    """
    acc: Any = pure(())
    for item in items:
        acc = item.ap_k(acc.map_k(_append))
    return acc


def traverse(items: Iterable[A], fn: Callable[[A], ApplicativeFunctor[B]], pure: Callable[[Tuple[()]], ApplicativeFunctor[Tuple[()]]]) -> ApplicativeFunctor[Tuple[B, ...]]:
    return flatten((fn(x) for x in items), pure)
