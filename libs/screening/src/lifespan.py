"""Screening Lib 生命週期管理

遵循 P&A 架構
"""

from injector import Injector, Module, provider, singleton

# Driving Ports
from libs.screening.src.ports.screen_stocks_port import ScreenStocksPort
from libs.screening.src.ports.calculate_roe_port import CalculateRoePort

# Driven Ports
from libs.screening.src.ports.stock_universe_provider_port import (
    StockUniverseProviderPort,
)
from libs.screening.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.screening.src.ports.fundamental_metrics_provider_port import (
    FundamentalMetricsProviderPort,
)
from libs.screening.src.ports.financial_statement_provider_port import (
    FinancialStatementProviderPort,
)
from libs.screening.src.ports.screening_result_storage_port import (
    ScreeningResultStoragePort,
)

# Application Services
from libs.screening.src.application.queries.screen_stocks import ScreenStocksQuery
from libs.screening.src.application.queries.calculate_roe import CalculateRoeQuery

# Driven Adapters
from libs.screening.src.adapters.driven.static.static_stock_universe_adapter import (
    StaticStockUniverseAdapter,
)
from libs.screening.src.adapters.driven.yahoo.price_history_yahoo_adapter import (
    PriceHistoryYahooAdapter,
)
from libs.screening.src.adapters.driven.finmind.finmind_fundamental_adapter import (
    FinMindFundamentalAdapter,
)
from libs.screening.src.adapters.driven.file.screening_result_file_adapter import (
    ScreeningResultFileAdapter,
)

# Clients
from libs.shared.src.clients.finmind.finmind_client import FinMindClient
from libs.shared.src.clients.twse.twse_client import TwseClient


class ScreeningModule(Module):
    """Screening DI Configuration"""

    @singleton
    @provider
    def provide_finmind_client(self) -> FinMindClient:
        return FinMindClient()

    @singleton
    @provider
    def provide_twse_client(self) -> TwseClient:
        return TwseClient()

    @singleton
    @provider
    def provide_finmind_adapter(
        self, client: FinMindClient, twse_client: TwseClient
    ) -> FinMindFundamentalAdapter:
        return FinMindFundamentalAdapter(client=client, twse_client=twse_client)

    @singleton
    @provider
    def provide_fundamentals(
        self, adapter: FinMindFundamentalAdapter
    ) -> FundamentalMetricsProviderPort:
        return adapter

    @singleton
    @provider
    def provide_statements(
        self, adapter: FinMindFundamentalAdapter
    ) -> FinancialStatementProviderPort:
        return adapter

    @singleton
    @provider
    def provide_universe(self) -> StockUniverseProviderPort:
        return StaticStockUniverseAdapter()

    @singleton
    @provider
    def provide_price_history(self) -> PriceHistoryProviderPort:
        return PriceHistoryYahooAdapter()

    @singleton
    @provider
    def provide_storage(self) -> ScreeningResultStoragePort:
        return ScreeningResultFileAdapter(base_dir="data/screening")

    @singleton
    @provider
    def provide_screen_stocks(
        self,
        universe: StockUniverseProviderPort,
        price_history: PriceHistoryProviderPort,
        fundamentals: FundamentalMetricsProviderPort,
        storage: ScreeningResultStoragePort,
    ) -> ScreenStocksPort:
        return ScreenStocksQuery(
            universe=universe,
            price_history=price_history,
            fundamentals=fundamentals,
            storage=storage,
        )

    @singleton
    @provider
    def provide_calculate_roe(
        self, statements: FinancialStatementProviderPort
    ) -> CalculateRoePort:
        return CalculateRoeQuery(statements=statements)


_injector: Injector | None = None

configure = ScreeningModule()


def startup() -> Injector:
    """Start DI container"""
    global _injector
    _injector = Injector([configure])
    return _injector


def shutdown() -> None:
    """Shutdown and release resources"""
    global _injector
    _injector = None


def get_injector() -> Injector:
    """Get DI container, auto-start if not initialized"""
    global _injector
    if _injector is None:
        startup()
    return _injector
