"""篩選結果 In-Memory Adapter

實作 ScreeningResultStoragePort，用於測試
"""

from libs.screening.src.ports.screening_result_storage_port import (
    ScreeningResultStoragePort,
)
from libs.shared.src.dtos.screening.screening_result_dto import ScreeningResultDTO


class ScreeningResultMemoryAdapter(ScreeningResultStoragePort):
    """篩選結果 In-Memory 儲存"""

    def __init__(self) -> None:
        self._results: dict[str, ScreeningResultDTO] = {}

    def save(self, result: ScreeningResultDTO) -> str:
        name = f"screening_results_{len(self._results) + 1:04d}"
        self._results[name] = result
        return name

    def load(self, name: str) -> ScreeningResultDTO | None:
        return self._results.get(name)

    def list_results(self) -> list[str]:
        return sorted(self._results, reverse=True)
