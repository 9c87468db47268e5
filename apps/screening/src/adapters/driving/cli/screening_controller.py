"""Screening CLI Controller

Driving Adapter — 將 CLI 指令轉換為 Use Case 調用
"""

from injector import Injector

from libs.screening.src.domain.services.screening_criteria import (
    build_screening_criteria,
)
from libs.screening.src.domain.services.symbol_converter import normalize_symbol_list
from libs.screening.src.ports.calculate_roe_port import CalculateRoePort
from libs.screening.src.ports.screen_stocks_port import ScreenStocksPort
from libs.screening.src.ports.screening_result_storage_port import (
    ScreeningResultStoragePort,
)
from libs.shared.src.constants.screening_thresholds import (
    KD_BUY_ZONE_HIGH,
    KD_BUY_ZONE_LOW,
    STAGE1_MAX_DEBT_RATIO,
    STAGE1_MIN_EPS_GROWTH,
    STAGE1_MIN_REVENUE_GROWTH,
    STAGE1_MIN_YOY_GROWTH,
)
from libs.shared.src.dtos.screening.screening_result_dto import (
    ScreenedStockDTO,
    ScreeningResultDTO,
)

TOP_PICKS = 3

ENTRY_STRATEGY = (
    "分3批進場，每批間隔1-2週",
    "設定停損點在買進價-10%",
    "獲利20-30%可先出場一半",
    "每週檢視技術指標變化",
)

FALLBACK_ADVICE = (
    "放寬部分篩選條件",
    "等待市場回檔再執行篩選",
    "考慮ETF作為替代選擇",
)


class ScreeningController:
    """台股篩選 CLI 控制器"""

    def __init__(self, injector: Injector) -> None:
        self._injector = injector

    def screen(
        self,
        stocks: str | None = None,
        min_yoy_growth: float | None = None,
        min_eps_growth: float | None = None,
        min_eps: float | None = None,
        save: bool = True,
    ) -> None:
        """執行三階段篩選並列印報告

        Args:
            stocks: 股票代碼，逗號分隔 (省略則使用預設股票池)
            min_yoy_growth: 年增率優等門檻 (%)
            min_eps_growth: EPS 成長優等門檻 (%)
            min_eps: EPS 優等門檻
            save: 是否儲存結果
        """
        criteria = build_screening_criteria(
            min_yoy_growth=min_yoy_growth,
            min_eps_growth=min_eps_growth,
            min_eps=min_eps,
        )
        symbols = normalize_symbol_list(stocks) if stocks else None

        print(f"🔍 準備篩選 {len(symbols) if symbols else '預設股票池'} ...")
        query = self._injector.get(ScreenStocksPort)
        result = query.execute(stocks=symbols, criteria=criteria, save=save)

        self._print_report(result)
        self._print_advice(result["targets"])

    def roe(self, symbol: str, years: int = 3) -> None:
        """計算 ROE (近四季淨利 / 股東權益)

        Args:
            symbol: 股票代碼
            years: 歷史年數
        """
        symbol_str = str(symbol)  # fire 會將純數字自動轉為 int
        query = self._injector.get(CalculateRoePort)
        report = query.execute(symbol_str, years=int(years))

        latest = report["latest"]
        print(f"\n📊 {report['symbol']} ROE")
        print("=" * 50)
        print(f"淨利(近四季): {latest['net_income']:,.0f}")
        print(f"股東權益: {latest['equity']:,.0f}")
        print(f"ROE: {latest['roe']:.2f}%")
        if report["historical"]:
            print("\n【歷年 ROE】")
            for row in report["historical"]:
                print(f"  {row['year']}: {row['roe']:.2f}%")
        print("=" * 50 + "\n")

    def history(self, name: str | None = None) -> None:
        """列出已儲存的篩選結果，或重新列印指定結果

        Args:
            name: 結果名稱 (例如 screening_results_20250101_093000)
        """
        storage = self._injector.get(ScreeningResultStoragePort)
        if name is None:
            names = storage.list_results()
            if not names:
                print("❌ 尚無篩選結果")
                return
            print(f"\n📁 已儲存 {len(names)} 筆篩選結果")
            for n in names:
                print(f"  {n}")
            return

        result = storage.load(str(name))
        if result is None:
            print(f"❌ 找不到 {name}")
            return
        self._print_report(result)
        self._print_advice(result["targets"])

    def _print_report(self, result: ScreeningResultDTO) -> None:
        criteria = result["criteria"]

        print("\n========== 股票篩選報告 ==========")
        print(f"篩選時間: {result['screened_at']}")
        print("\n【剔除條件】")
        print(f"- ROE > 0%，EPS > 0，負債比 < {STAGE1_MAX_DEBT_RATIO:.0f}%")
        print(
            f"- 營收成長 > {STAGE1_MIN_REVENUE_GROWTH:.0f}%，"
            f"年增率 > {STAGE1_MIN_YOY_GROWTH:.0f}%，"
            f"EPS 成長 > {STAGE1_MIN_EPS_GROWTH:.0f}%"
        )
        print("\n【評分參考】")
        print(f"- 年增率 ≥ {criteria['min_yoy_growth']:.1f}% 為優")
        print(f"- EPS 成長 ≥ {criteria['min_eps_growth']:.1f}% 為優")
        print(f"- EPS ≥ {criteria['min_eps']:.1f} 為優")
        print("- 股價站上60日均線")
        print(f"- KD值在 {KD_BUY_ZONE_LOW:.0f}-{KD_BUY_ZONE_HIGH:.0f} 為買進區")

        print(
            f"\n【符合條件股票】共 {result['qualified']} 檔"
            f" (掃描 {result['scanned']}，剔除 {len(result['excluded'])}"
            f"，無資料 {len(result['unavailable'])})"
        )
        print("=" * 50)

        for target in result["targets"]:
            verdict = target["verdict"]
            metrics = verdict["metrics"]
            indicators = verdict["indicators"]
            stage2 = verdict["stage2"]
            stage3 = verdict["stage3"]

            print(f"\n{target['rank']}. {target['name']} ({target['symbol']})")
            print(f"   綜合評分: {target['score']:.1f}")
            print(f"   ROE: {metrics['roe']:.1f}%")
            print(f"   營收成長: {metrics['revenue_growth']:.1f}%")
            print(f"   負債比: {metrics['debt_ratio']:.1f}%")
            print(f"   現價: {indicators['price']:.2f} | MA60: {indicators['ma60']:.2f}")
            print(f"   K值: {indicators['k']:.1f} | D值: {indicators['d']:.1f}")
            print(
                f"   品質: {'✅' if stage2['passed'] else '⚠️'} "
                f"{stage2['pass_count']}/{stage2['total_checks']}"
                f" | 技術: {'✅' if stage3['passed'] else '⚠️'} "
                f"{stage3['pass_count']}/{stage3['total_checks']}"
            )
            print(
                f"   波動率: {target['volatility']:.1%}"
                f" | 夏普值: {target['sharpe_ratio']:.3f}"
            )
            print("   ---")

        if result["excluded"]:
            print("\n【剔除】")
            for row in result["excluded"]:
                print(f"  ❌ {row['symbol']}: {'; '.join(row['reasons'])}")

        if result.get("saved_to"):
            print(f"\n結果已儲存至: {result['saved_to']}")

    def _print_advice(self, targets: list[ScreenedStockDTO]) -> None:
        print("\n========== 買進建議 ==========")
        if not targets:
            print("目前沒有符合所有條件的股票")
            print("建議：")
            for i, line in enumerate(FALLBACK_ADVICE, start=1):
                print(f"{i}. {line}")
            return

        print(f"【優先考慮】評分最高的前{TOP_PICKS}檔:")
        for target in targets[:TOP_PICKS]:
            print(
                f"{target['rank']}. {target['name']} ({target['symbol']})"
                f" - 評分: {target['score']:.1f}"
            )

        print("\n【進場策略】")
        for i, line in enumerate(ENTRY_STRATEGY, start=1):
            print(f"{i}. {line}")
