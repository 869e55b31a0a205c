# src/drills/core/repeat.py
"""String repetition."""

DEFAULT_COUNT = 5


def repeat(text: str, count: int = DEFAULT_COUNT) -> str:
    repeated = ""
    for _ in range(count):
        repeated += text
    return repeated
