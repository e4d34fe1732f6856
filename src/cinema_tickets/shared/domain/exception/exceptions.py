class DomainException(Exception):
    """ドメイン層で発生する基底例外

    error_code は Handler 層でエラーレスポンスに変換する際のキー。
    """

    error_code = "DOMAIN_ERROR"


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    error_code = "BUSINESS_RULE_VIOLATION"


class TypeMismatchException(DomainException, TypeError):
    """外部サービスの契約（整数引数）に違反した場合"""

    error_code = "TYPE_MISMATCH"
