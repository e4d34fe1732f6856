from __future__ import annotations

from dataclasses import dataclass

from cinema_tickets.shared.utils.validators import is_strict_int
from cinema_tickets.ticket.domain.enum import TicketCategory
from cinema_tickets.ticket.domain.exception import InvalidTicketRequestException


@dataclass(frozen=True)
class TicketRequestItem:
    """チケットリクエスト（種別と枚数の組）

    生成時に検証するため、不正な値を持つインスタンスは存在しない。
    """

    category: TicketCategory
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.category, TicketCategory):
            raise InvalidTicketRequestException(
                f"Unknown ticket type: {self.category!r}"
            )
        if not is_strict_int(self.count):
            raise InvalidTicketRequestException(
                "Number of tickets must be an integer"
            )
        if self.count <= 0:
            raise InvalidTicketRequestException(
                "Number of tickets must be greater than zero"
            )

    @property
    def amount(self) -> int:
        """このリクエスト分の料金"""
        return self.category.price * self.count

    @property
    def seats(self) -> int:
        """このリクエスト分の座席数"""
        return self.category.seat_allocation * self.count

    @classmethod
    def of(cls, category: TicketCategory | str, count: int) -> TicketRequestItem:
        """種別名（"ADULT" など）または TicketCategory から生成"""
        if isinstance(category, TicketCategory):
            return cls(category=category, count=count)
        try:
            resolved = TicketCategory(category)
        except ValueError:
            raise InvalidTicketRequestException(
                f"Unknown ticket type: {category!r}"
            ) from None
        return cls(category=resolved, count=count)
