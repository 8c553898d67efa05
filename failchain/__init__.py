from .kind import Functor, ApplicativeFunctor, Monad, flatten as flatten_k, traverse as traverse_k
from .validation import (
    Validation,
    Success,
    Fail,
    success,
    fail,
    pure,
    map2,
    flatten,
    traverse,
    to_validation,
    if_errors,
    if_null_validation,
)
from .result import Result, Ok, Errors, from_errors
from .option import Option, Some, NONE, from_nullable
from .exceptions import FailedExtraction
from .logger import ConsoleLogger
from .curry import curry
