class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class InvalidArgumentException(DomainException):
    """引数が不正な場合（None、必須項目の欠落、許可されない変更）"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class BookingOverlapException(BusinessRuleViolationException):
    """同じ部屋の既存予約と期間が重なる場合"""

    pass


class FailedInitializationException(DomainException):
    """生成時点で不正な状態のエンティティを作ろうとした場合"""

    pass
