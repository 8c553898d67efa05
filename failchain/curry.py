from __future__ import annotations
import inspect
from typing import Any, Callable, Optional


def curry(fn: Callable[..., Any], arity: Optional[int] = None) -> Callable[..., Any]:
    """Turn ``fn(a, b, c)`` into ``fn(a)(b)(c)``.

    Handy for building a value out of several validations with ``ap``:

        v_c.ap(v_b.ap(v_a.map(curry(make))))
    """
    if arity is None:
        params = inspect.signature(fn).parameters.values()
        arity = sum(1 for p in params if p.default is p.empty and p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD))
    if arity < 1:
        raise ValueError(f"cannot curry a function of arity {arity}")

    def step(args: tuple) -> Callable[[Any], Any]:
        def take(x: Any) -> Any:
            got = args + (x,)
            if len(got) == arity:
                return fn(*got)
            return step(got)
        return take

    return step(())
