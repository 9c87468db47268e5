"""篩選股票 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.screening.screening_criteria_dto import (
    ScreeningCriteriaDTO,
)
from libs.shared.src.dtos.screening.screening_result_dto import ScreeningResultDTO


class ScreenStocksPort(Protocol):
    """三階段篩選 + 綜合評分排序

    CLI Entry: screening screen
    """

    def execute(
        self,
        stocks: list[str] | None = None,
        criteria: ScreeningCriteriaDTO | None = None,
        save: bool = True,
    ) -> ScreeningResultDTO:
        """
        執行篩選

        Args:
            stocks: 股票代碼清單 (None 則使用預設股票池)
            criteria: 篩選條件 (None 則使用預設條件)
            save: 是否儲存結果

        Returns:
            ScreeningResultDTO: 依分數排序的合格標的、剔除與無法取得清單
        """
        ...
