from cinema_tickets.shared.domain.exception import BusinessRuleViolationException


class InvalidPurchaseException(BusinessRuleViolationException):
    """チケット購入リクエストが受け付けられない場合の基底例外"""

    error_code = "INVALID_PURCHASE"


class InvalidAccountException(InvalidPurchaseException):
    """アカウントIDが正の整数でない場合"""

    error_code = "INVALID_ACCOUNT"


class NoTicketsException(InvalidPurchaseException):
    """購入するチケットが1件も指定されていない場合"""

    error_code = "NO_TICKETS"


class InvalidTicketRequestException(InvalidPurchaseException):
    """チケットリクエストの形式が不正な場合（種別・枚数）"""

    error_code = "INVALID_TICKET_REQUEST"


class AdultRequiredException(InvalidPurchaseException):
    """子供・乳児チケットを大人チケットなしで購入しようとした場合"""

    error_code = "ADULT_REQUIRED"


class TicketLimitExceededException(InvalidPurchaseException):
    """1回の購入枚数が上限を超えた場合"""

    error_code = "TICKET_LIMIT_EXCEEDED"
