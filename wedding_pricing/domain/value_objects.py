"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Self


class ServiceType(str, Enum):
    """Services that can be booked for a wedding."""

    PHOTOGRAPHY = "Photography"
    VIDEO_RECORDING = "VideoRecording"
    BLURAY_PACKAGE = "BlurayPackage"
    TWO_DAY_EVENT = "TwoDayEvent"
    WEDDING_SESSION = "WeddingSession"


class ServiceYear(IntEnum):
    """Years the price list covers."""

    Y2020 = 2020
    Y2021 = 2021
    Y2022 = 2022


class ActionType(str, Enum):
    """Kinds of change a customer can make to their selection."""

    SELECT = "Select"
    DESELECT = "Deselect"


@dataclass(frozen=True, order=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __sub__(self, other: "Money") -> "Money":
        return Money(self.amount - other.amount)

    def is_zero(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
