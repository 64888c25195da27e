"""Basic Result chaining example.

Shows short-circuiting: the chain stops at the first failing check and
the remaining checks never run.

Usage:
    python examples/basic_chain.py
"""

from src.railway.error import Error
from src.railway.result import Result, failure, success


def must_be_positive(x: int) -> Result[int, Error]:
    return success(x) if x > 0 else failure(Error("ERR_004", "Must be positive"))


def must_be_even(x: int) -> Result[int, Error]:
    return success(x) if x % 2 == 0 else failure(Error("ERR_005", "Must be even"))


def must_be_below_100(x: int) -> Result[int, Error]:
    return success(x) if x < 100 else failure(Error("ERR_006", "Must be less than 100"))


def check(x: int) -> Result[str, Error]:
    return (
        success(x)
        .on_success(must_be_positive)
        .on_success(must_be_even)
        .on_success(must_be_below_100)
        .on_success(lambda v: f"{v} passed every check")
    )


def main() -> None:
    for candidate in (42, 15, -3, 250):
        outcome = check(candidate).match(
            lambda message: message,
            lambda error: f"{candidate} rejected ({error})",
        )
        print(outcome)


if __name__ == "__main__":
    main()
