"""Technical Indicators DTO"""

from typing import TypedDict


class TechnicalIndicatorsDTO(TypedDict):
    """Indicators derived from a price series"""

    ma60: float  # 60-day moving average (0 when not computable)
    k: float  # Stochastic %K [0, 100]
    d: float  # Stochastic %D [0, 100]
    price: float  # Latest close or external quote
