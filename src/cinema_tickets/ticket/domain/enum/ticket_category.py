from enum import Enum


class TicketCategory(str, Enum):
    """チケット種別

    種別ごとの料金と座席割り当て数を保持する。値は固定で変更されない。
    """

    price: int
    seat_allocation: int

    def __new__(cls, value: str, price: int, seat_allocation: int) -> "TicketCategory":
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.price = price
        obj.seat_allocation = seat_allocation
        return obj

    ADULT = ("ADULT", 20, 1)
    CHILD = ("CHILD", 10, 1)
    # 乳児は大人の膝の上に座るため座席を割り当てない
    INFANT = ("INFANT", 0, 0)
