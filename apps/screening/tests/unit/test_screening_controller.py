"""ScreeningController 單元測試"""

from unittest.mock import MagicMock

import pytest

from apps.screening.src.adapters.driving.cli.screening_controller import (
    ScreeningController,
)
from libs.screening.src.adapters.driven.memory.screening_result_memory_adapter import (
    ScreeningResultMemoryAdapter,
)
from libs.screening.src.domain.services.screening_criteria import (
    DEFAULT_SCREENING_CRITERIA,
)
from libs.screening.src.ports.screening_result_storage_port import (
    ScreeningResultStoragePort,
)


class TestScreeningController:
    """測試 CLI 報告輸出"""

    @pytest.fixture
    def storage(self) -> ScreeningResultMemoryAdapter:
        adapter = ScreeningResultMemoryAdapter()
        adapter.save(
            {
                "screened_at": "2025-01-02T09:30:00",
                "criteria": {**DEFAULT_SCREENING_CRITERIA},
                "scanned": 2,
                "qualified": 0,
                "targets": [],
                "excluded": [
                    {"symbol": "1101", "reasons": ["ROE 0.00% 未大於 0"]}
                ],
                "unavailable": [],
                "saved_to": None,
            }
        )
        return adapter

    @pytest.fixture
    def controller(self, storage) -> ScreeningController:
        injector = MagicMock()
        injector.get.side_effect = lambda port: {
            ScreeningResultStoragePort: storage
        }[port]
        return ScreeningController(injector)

    def test_report_separates_exclusion_from_advisory_checks(
        self, controller, capsys
    ) -> None:
        """季線與 KD 列為評分參考，不列在剔除條件"""
        controller.history("screening_results_0001")
        out = capsys.readouterr().out

        exclusion, advisory = out.split("【剔除條件】")[1].split("【評分參考】")
        assert "營收成長 > -20%" in exclusion
        assert "60日均線" not in exclusion
        assert "60日均線" in advisory
        assert "KD值在 50-80 為買進區" in advisory

    def test_no_targets_prints_fallback_advice(self, controller, capsys) -> None:
        controller.history("screening_results_0001")
        out = capsys.readouterr().out

        assert "目前沒有符合所有條件的股票" in out
        assert "1101: ROE 0.00% 未大於 0" in out

    def test_missing_result(self, controller, capsys) -> None:
        controller.history("screening_results_9999")
        assert "找不到" in capsys.readouterr().out
