from __future__ import annotations
from typing import Generic, TypeVar

E = TypeVar("E")


class FailedExtraction(Exception, Generic[E]):
    """Raised by ``Validation.get()`` on a failed value.

    Carries only the newest failure of the chain.
    """
    def __init__(self, failure: E):
        super().__init__(repr(failure)); self.failure = failure
