from __future__ import annotations

from dataclasses import dataclass


class InvalidConfigurationError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class GroupingConfig:
    """
    Digit grouping parameters, threaded explicitly through every call.

    group_size applies to decimal integer and fractional parts; hex and binary
    digits always group in fours and date/time fields use fixed widths.
    threshold is the minimum sub-span length before any grouping happens.
    """

    group_size: int = 3
    threshold: int = 5

    def validate(self) -> None:
        if isinstance(self.group_size, bool) or not isinstance(self.group_size, int):
            raise InvalidConfigurationError("group_size must be an integer")
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            raise InvalidConfigurationError("threshold must be an integer")
        if self.group_size <= 0:
            raise InvalidConfigurationError("group_size must be > 0")
        if self.threshold < 0:
            raise InvalidConfigurationError("threshold must be >= 0")

    def __post_init__(self) -> None:
        self.validate()

    def to_dict(self) -> dict[str, int]:
        return {"group_size": self.group_size, "threshold": self.threshold}
