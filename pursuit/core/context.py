"""
Host-supplied invocation context.

The host authenticates the caller and owns the block height. Both are passed
explicitly into every operation instead of being read from global state.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HostContext:
    """
    Caller identity and current time counter for one invocation.

    In production: the host provides both values.
    In tests: build one per identity and advance() the height manually.
    """
    caller: str
    height: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.caller, str) or not self.caller:
            raise ValueError("HostContext.caller must be a non-empty string")
        if isinstance(self.height, bool) or not isinstance(self.height, int) or self.height < 0:
            raise ValueError(f"HostContext.height must be a non-negative integer, got {self.height!r}")

    def advance(self, step: int = 1) -> "HostContext":
        """
        Return a context for the same caller at a later height.

        Heights never decrease, so step must be non-negative.
        """
        if step < 0:
            raise ValueError("height is monotonic; step must be >= 0")
        return HostContext(self.caller, self.height + step)

    def as_caller(self, caller: str) -> "HostContext":
        """Same height, different caller."""
        return HostContext(caller, self.height)
