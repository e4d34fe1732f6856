from abc import ABC, abstractmethod


class TicketPaymentGateway(ABC):
    """決済サービスのインターフェース

    - 実装は外部サービス側にあり、ここでは契約のみを定義する
    - 引数が整数でない場合、実装は TypeMismatchException を送出する
    """

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """アカウントに対して金額を請求する"""
        raise NotImplementedError
