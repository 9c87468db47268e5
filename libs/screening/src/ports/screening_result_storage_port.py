"""Screening Result Storage Port — Driven Port for result persistence"""

from typing import Protocol, runtime_checkable

from libs.shared.src.dtos.screening.screening_result_dto import ScreeningResultDTO


@runtime_checkable
class ScreeningResultStoragePort(Protocol):
    """篩選結果儲存埠

    儲存格式: data/screening/screening_results_{YYYYMMDD_HHMMSS}.json
    """

    def save(self, result: ScreeningResultDTO) -> str:
        """儲存結果

        Returns:
            儲存位置 (檔案路徑)
        """
        ...

    def load(self, name: str) -> ScreeningResultDTO | None:
        """讀取結果 (不存在則回傳 None)"""
        ...

    def list_results(self) -> list[str]:
        """列出已儲存的結果名稱 (新到舊)"""
        ...
