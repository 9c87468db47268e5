import pytest

from libs.shared.src.dtos.screening.fundamental_metrics_dto import (
    FundamentalMetricsDTO,
)
from libs.shared.src.dtos.screening.technical_indicators_dto import (
    TechnicalIndicatorsDTO,
)


@pytest.fixture
def healthy_metrics() -> FundamentalMetricsDTO:
    """全部達優等標準的基本面"""
    return {
        "roe": 20.0,
        "revenue_growth": 15.0,
        "yoy_growth": 25.0,
        "eps_growth": 150.0,
        "eps": 3.0,
        "debt_ratio": 20.0,
        "dividend_years": 6,
    }


@pytest.fixture
def strong_indicators() -> TechnicalIndicatorsDTO:
    """站上季線 + KD 位於買進區"""
    return {"ma60": 100.0, "k": 60.0, "d": 65.0, "price": 110.0}
