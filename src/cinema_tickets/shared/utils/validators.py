from cinema_tickets.shared.domain.exception import TypeMismatchException


def is_strict_int(v: object) -> bool:
    """bool を除いた int かどうかを判定する

    bool は int のサブクラスだが、枚数や ID としては受け付けない。
    """
    return isinstance(v, int) and not isinstance(v, bool)


def ensure_int(name: str, v: object) -> int:
    """外部サービスに渡す値が整数であることを保証する"""
    if not is_strict_int(v):
        raise TypeMismatchException(
            f"{name} must be an integer, got {type(v).__name__}"
        )
    return v
