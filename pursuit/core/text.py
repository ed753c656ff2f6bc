"""
Fixed-capacity validated text.

Vision descriptions are capped at VISION_CAPACITY characters. Over-long input is
rejected, never truncated.
"""

from dataclasses import dataclass

from .errors import InvalidInput

VISION_CAPACITY = 100


@dataclass(frozen=True)
class BoundedText:
    value: str
    capacity: int = VISION_CAPACITY

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidInput(f"text must be a string, got {type(self.value).__name__}")
        if not self.value:
            raise InvalidInput("text must not be empty")
        if len(self.value) > self.capacity:
            raise InvalidInput(
                f"text is {len(self.value)} characters, capacity is {self.capacity}"
            )

    @classmethod
    def parse(cls, raw, capacity: int = VISION_CAPACITY) -> "BoundedText":
        return cls(raw, capacity)

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value
