from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from cinema_tickets.ticket.domain.enum import TicketCategory
from cinema_tickets.ticket.domain.value_object.ticket_request_item import (
    TicketRequestItem,
)


@dataclass(frozen=True)
class TicketTally:
    """種別ごとの購入枚数の集計"""

    counts: Mapping[TicketCategory, int] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def count(self, category: TicketCategory) -> int:
        return self.counts.get(category, 0)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def has_adult(self) -> bool:
        return self.count(TicketCategory.ADULT) > 0

    @property
    def has_child_or_infant(self) -> bool:
        return (
            self.count(TicketCategory.CHILD) > 0
            or self.count(TicketCategory.INFANT) > 0
        )

    @classmethod
    def from_items(cls, items: Iterable[TicketRequestItem]) -> TicketTally:
        """チケットリクエストの枚数を種別ごとに合算する"""
        counter: Counter[TicketCategory] = Counter()
        for item in items:
            counter[item.category] += item.count
        return cls(counts=MappingProxyType(dict(counter)))
