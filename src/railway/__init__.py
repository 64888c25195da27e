"""Railway-oriented result types - fallible computations without exceptions."""

from src.railway.error import Error
from src.railway.result import (
    Failure,
    Result,
    Success,
    coerce,
    failure,
    returns_result,
    success,
)

__all__ = [
    "Error",
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "coerce",
    "returns_result",
]
