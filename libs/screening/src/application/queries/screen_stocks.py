"""篩選股票 Query

實作 ScreenStocksPort Driving Port
流程: 股票池 → 基本面 + 價格 → 三階段篩選 → 綜合評分排序 → 風險指標 → 儲存
"""

import logging
import time
from datetime import datetime

from injector import inject
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

from libs.screening.src.domain.services.ranking_pipeline import (
    rank_verdicts,
    screen_candidate,
)
from libs.screening.src.domain.services.risk_metrics import calculate_risk_metrics
from libs.screening.src.domain.services.screening_criteria import (
    DEFAULT_SCREENING_CRITERIA,
)
from libs.screening.src.domain.services.symbol_converter import (
    normalize_symbol_list,
)
from libs.screening.src.ports.fundamental_metrics_provider_port import (
    FundamentalMetricsProviderPort,
)
from libs.screening.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.screening.src.ports.screen_stocks_port import ScreenStocksPort
from libs.screening.src.ports.screening_result_storage_port import (
    ScreeningResultStoragePort,
)
from libs.screening.src.ports.stock_universe_provider_port import (
    StockUniverseProviderPort,
)
from libs.shared.src.constants.request_settings import SCREENING_DELAY_SECONDS
from libs.shared.src.dtos.screening.screening_criteria_dto import (
    ScreeningCriteriaDTO,
)
from libs.shared.src.dtos.screening.screening_result_dto import (
    ExcludedStockDTO,
    ScreenedStockDTO,
    ScreeningResultDTO,
    UnavailableStockDTO,
)
from libs.shared.src.dtos.screening.verdict_dto import VerdictDTO
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)


class ScreenStocksQuery(ScreenStocksPort):
    """三階段篩選台股"""

    @inject
    def __init__(
        self,
        universe: StockUniverseProviderPort,
        price_history: PriceHistoryProviderPort,
        fundamentals: FundamentalMetricsProviderPort,
        storage: ScreeningResultStoragePort | None = None,
        delay_seconds: float = SCREENING_DELAY_SECONDS,
        show_progress: bool = True,
    ):
        """Initialize Query

        Args:
            universe: 預設股票池
            price_history: 價格歷史 (Yahoo)
            fundamentals: 基本面指標 (FinMind)
            storage: 結果儲存 (None 則不儲存)
            delay_seconds: 每檔股票之間的間隔秒數，避免被資料源限流
            show_progress: 是否顯示進度條
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._universe = universe
        self._price_history = price_history
        self._fundamentals = fundamentals
        self._storage = storage
        self._delay_seconds = delay_seconds
        self._show_progress = show_progress

    def _create_progress(self) -> Progress:
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TextColumn("•"),
            TimeElapsedColumn(),
            TextColumn("•"),
            TimeRemainingColumn(elapsed_when_finished=True),
            refresh_per_second=4,
            disable=not self._show_progress,
        )

    def _evaluate_one(
        self, symbol: str, criteria: ScreeningCriteriaDTO
    ) -> tuple[VerdictDTO, list[float]]:
        """取得單檔資料並執行篩選

        Raises:
            StockDataUnavailableError: 資料無法取得 (不進入篩選)
        """
        metrics = self._fundamentals.get_fundamental_metrics(symbol)
        series = self._price_history.get_price_history(symbol)
        quote = self._price_history.get_current_price(symbol)

        verdict = screen_candidate(
            {
                "symbol": symbol,
                "name": self._universe.get_stock_name(symbol),
                "metrics": metrics,
                "series": series,
                "quote": quote,
            },
            criteria,
        )
        return verdict, series["close"]

    def _build_targets(
        self, verdicts: list[VerdictDTO], closes: dict[str, list[float]]
    ) -> list[ScreenedStockDTO]:
        targets: list[ScreenedStockDTO] = []
        for rank, verdict in enumerate(rank_verdicts(verdicts), start=1):
            prices = closes[verdict["symbol"]]
            targets.append(
                {
                    "rank": rank,
                    "symbol": verdict["symbol"],
                    "name": verdict["name"],
                    "score": verdict["score"],
                    **calculate_risk_metrics(prices),
                    "verdict": verdict,
                }
            )
        return targets

    def execute(
        self,
        stocks: list[str] | None = None,
        criteria: ScreeningCriteriaDTO | None = None,
        save: bool = True,
    ) -> ScreeningResultDTO:
        criteria = {**(criteria or DEFAULT_SCREENING_CRITERIA)}
        symbols = (
            normalize_symbol_list(stocks)
            if stocks
            else self._universe.get_stock_list()
        )

        self._logger.info(f"開始篩選 {len(symbols)} 檔股票")

        verdicts: list[VerdictDTO] = []
        closes: dict[str, list[float]] = {}
        excluded: list[ExcludedStockDTO] = []
        unavailable: list[UnavailableStockDTO] = []

        with self._create_progress() as progress:
            task = progress.add_task("篩選中...", total=len(symbols))
            for i, symbol in enumerate(symbols):
                if i > 0 and self._delay_seconds > 0:
                    time.sleep(self._delay_seconds)
                progress.update(task, description=f"篩選 {symbol}")

                try:
                    verdict, prices = self._evaluate_one(symbol, criteria)
                except StockDataUnavailableError as e:
                    self._logger.warning(f"{symbol} 資料無法取得: {e.message}")
                    unavailable.append({"symbol": symbol, "reason": e.message})
                    progress.advance(task)
                    continue

                if verdict["stage1"]["passed"]:
                    verdicts.append(verdict)
                    closes[symbol] = prices
                else:
                    reasons = verdict["stage1"]["reasons"]
                    self._logger.info(f"{symbol} 未通過強制條件: {'; '.join(reasons)}")
                    excluded.append({"symbol": symbol, "reasons": reasons})
                progress.advance(task)

        targets = self._build_targets(verdicts, closes)
        self._logger.info(
            f"篩選完成: 合格 {len(targets)} / 剔除 {len(excluded)} / 無資料 {len(unavailable)}"
        )

        result: ScreeningResultDTO = {
            "screened_at": datetime.now().isoformat(timespec="seconds"),
            "criteria": criteria,
            "scanned": len(symbols),
            "qualified": len(targets),
            "targets": targets,
            "excluded": excluded,
            "unavailable": unavailable,
            "saved_to": None,
        }

        if save and self._storage is not None:
            result["saved_to"] = self._storage.save(result)
            self._logger.info(f"結果已保存到: {result['saved_to']}")

        return result
