"""Screening DI 配置單元測試"""

from libs.screening.src.adapters.driven.finmind.finmind_fundamental_adapter import (
    FinMindFundamentalAdapter,
)
from libs.screening.src.adapters.driven.static.static_stock_universe_adapter import (
    StaticStockUniverseAdapter,
)
from libs.screening.src.application.queries.calculate_roe import CalculateRoeQuery
from libs.screening.src.application.queries.screen_stocks import ScreenStocksQuery
from libs.screening.src.lifespan import get_injector, shutdown, startup
from libs.screening.src.ports.calculate_roe_port import CalculateRoePort
from libs.screening.src.ports.financial_statement_provider_port import (
    FinancialStatementProviderPort,
)
from libs.screening.src.ports.fundamental_metrics_provider_port import (
    FundamentalMetricsProviderPort,
)
from libs.screening.src.ports.screen_stocks_port import ScreenStocksPort
from libs.screening.src.ports.stock_universe_provider_port import (
    StockUniverseProviderPort,
)
from libs.shared.src.constants.stock_universe import TW_WATCHLIST


class TestScreeningModule:
    """測試 DI 綁定"""

    def teardown_method(self) -> None:
        shutdown()

    def test_driving_ports_resolve(self) -> None:
        injector = startup()

        assert isinstance(injector.get(ScreenStocksPort), ScreenStocksQuery)
        assert isinstance(injector.get(CalculateRoePort), CalculateRoeQuery)

    def test_finmind_adapter_shared_by_both_ports(self) -> None:
        injector = get_injector()

        fundamentals = injector.get(FundamentalMetricsProviderPort)
        statements = injector.get(FinancialStatementProviderPort)

        assert isinstance(fundamentals, FinMindFundamentalAdapter)
        assert fundamentals is statements


class TestStaticStockUniverseAdapter:
    """測試預設股票池"""

    def test_default_watchlist(self) -> None:
        adapter = StaticStockUniverseAdapter()

        assert isinstance(adapter, StockUniverseProviderPort)
        assert adapter.get_stock_list() == list(TW_WATCHLIST)
        assert adapter.get_stock_name("2330") == "台積電"
        assert adapter.get_stock_name("0000") == ""
