from dataclasses import dataclass

from cinema_tickets.shared.utils.validators import is_strict_int
from cinema_tickets.ticket.domain.exception import InvalidAccountException


@dataclass(frozen=True)
class AccountId:
    """購入者のアカウントID

    Value Object として不変性を保証。
    正の整数のみ受け付ける。
    """

    value: int

    def __post_init__(self) -> None:
        if not is_strict_int(self.value) or self.value <= 0:
            raise InvalidAccountException("Account ID is invalid")

    def __str__(self) -> str:
        return str(self.value)
