"""Screening Result File Adapter — 本地 JSON 檔案儲存實作"""

import json
from datetime import datetime
from pathlib import Path
from typing import Callable

from libs.screening.src.ports.screening_result_storage_port import (
    ScreeningResultStoragePort,
)
from libs.shared.src.dtos.screening.screening_result_dto import ScreeningResultDTO


class ScreeningResultFileAdapter(ScreeningResultStoragePort):
    """篩選結果檔案儲存器

    儲存格式: data/screening/screening_results_{YYYYMMDD_HHMMSS}.json
    """

    FILE_PREFIX = "screening_results_"

    def __init__(
        self,
        base_dir: str = "data/screening",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """初始化

        Args:
            base_dir: 基礎目錄路徑
            clock: 產生檔名時間戳的時鐘 (測試可注入)
        """
        self._base_dir = Path(base_dir)
        self._clock = clock

    def _get_file_path(self, name: str) -> Path:
        if not name.endswith(".json"):
            name += ".json"
        return self._base_dir / name

    def save(self, result: ScreeningResultDTO) -> str:
        """儲存結果

        Args:
            result: 篩選結果

        Returns:
            儲存的檔案路徑
        """
        self._base_dir.mkdir(parents=True, exist_ok=True)

        stamp = self._clock().strftime("%Y%m%d_%H%M%S")
        file_path = self._get_file_path(f"{self.FILE_PREFIX}{stamp}")
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(result, f, ensure_ascii=False, indent=2)
        return str(file_path)

    def load(self, name: str) -> ScreeningResultDTO | None:
        """讀取結果

        Args:
            name: 檔名 (可省略 .json)

        Returns:
            結果字典，若不存在則回傳 None
        """
        file_path = self._get_file_path(name)
        if not file_path.exists():
            return None

        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)

    def list_results(self) -> list[str]:
        """列出已儲存結果 (新到舊)"""
        if not self._base_dir.exists():
            return []
        return sorted(
            (p.stem for p in self._base_dir.glob(f"{self.FILE_PREFIX}*.json")),
            reverse=True,
        )
