from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from cinema_tickets.ticket.domain.exception import (
    InvalidTicketRequestException,
    NoTicketsException,
)
from cinema_tickets.ticket.domain.value_object.account_id import AccountId
from cinema_tickets.ticket.domain.value_object.ticket_request_item import (
    TicketRequestItem,
)


@dataclass(frozen=True)
class PurchaseRequest:
    """購入リクエスト

    アカウントIDと、入力順を保ったチケットリクエストの組。
    """

    account_id: AccountId
    ticket_requests: tuple[TicketRequestItem, ...]

    def __post_init__(self) -> None:
        if not self.ticket_requests:
            raise NoTicketsException("No tickets have been found to purchase")
        for ticket_request in self.ticket_requests:
            if not isinstance(ticket_request, TicketRequestItem):
                raise InvalidTicketRequestException(
                    "Ticket is not an instance of TicketRequestItem"
                )

    @classmethod
    def create(
        cls,
        account_id: int,
        ticket_requests: Iterable[TicketRequestItem] | None,
    ) -> PurchaseRequest:
        """プリミティブ型のアカウントIDから生成する

        アカウントIDの検証が先に行われる。
        """
        validated_account_id = AccountId(value=account_id)
        if ticket_requests is None:
            raise NoTicketsException("No tickets have been found to purchase")
        try:
            items = tuple(ticket_requests)
        except TypeError:
            raise InvalidTicketRequestException(
                "Ticket requests must be a sequence of TicketRequestItem"
            ) from None
        return cls(account_id=validated_account_id, ticket_requests=items)
