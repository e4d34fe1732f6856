from abc import ABC, abstractmethod


class SeatReservationGateway(ABC):
    """座席予約サービスのインターフェース

    - 実装は外部サービス側にあり、ここでは契約のみを定義する
    - 引数が整数でない場合、実装は TypeMismatchException を送出する
    """

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """アカウントに対して座席を確保する"""
        raise NotImplementedError
