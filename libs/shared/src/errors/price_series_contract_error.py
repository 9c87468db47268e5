"""Price Series Contract Error"""

from libs.shared.src.errors.domain_error import DomainError


class PriceSeriesContractError(DomainError):
    """Price series violates the input contract

    The close/high/low sequences must have equal length and contain only
    strictly positive values. This is a caller bug, not a runtime condition.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"價格序列不符合規格: {reason}", code="PRICE_SERIES_CONTRACT")
        self.reason = reason
