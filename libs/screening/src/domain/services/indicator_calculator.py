"""Technical Indicator Calculator

60-day moving average and the stochastic oscillator (%K / %D)
%K / %D use the one-pole recursive smoother (constant 1/3) seeded at 50,
not the 3-period simple moving average variant.
"""

import numpy as np

from libs.shared.src.constants.screening_thresholds import (
    KD_SEED,
    KD_SMOOTHING,
    KD_WINDOW,
    MA_WINDOW,
)
from libs.shared.src.dtos.screening.price_series_dto import (
    PriceBarDTO,
    PriceSeriesDTO,
)
from libs.shared.src.dtos.screening.technical_indicators_dto import (
    TechnicalIndicatorsDTO,
)
from libs.shared.src.errors.price_series_contract_error import (
    PriceSeriesContractError,
)


def validate_price_series(series: PriceSeriesDTO) -> None:
    """
    Check the price series input contract

    Raises:
        PriceSeriesContractError: lengths differ or an entry is not > 0
    """
    lengths = {name: len(series[name]) for name in ("close", "high", "low")}
    if len(set(lengths.values())) != 1:
        raise PriceSeriesContractError(f"序列長度不一致 {lengths}")

    for name in ("close", "high", "low"):
        for i, value in enumerate(series[name]):
            if not value > 0:
                raise PriceSeriesContractError(f"{name}[{i}] = {value} 非正數")


def calculate_moving_average(closes: list[float], window: int = MA_WINDOW) -> float:
    """
    Trailing simple moving average

    Args:
        closes: Close prices, oldest first
        window: Window length

    Returns:
        float: Mean of the last `window` closes, 0.0 when history is too short
    """
    if len(closes) < window:
        return 0.0
    return float(np.mean(np.asarray(closes[-window:], dtype=float)))


def calculate_rsv_series(
    closes: list[float],
    highs: list[float],
    lows: list[float],
    window: int = KD_WINDOW,
) -> list[float]:
    """
    Raw stochastic values for every index with a full trailing window

    RSV = 100 × (close - lowest low) / (highest high - lowest low)
    A zero-range window yields the neutral value 50.

    Returns:
        list[float]: RSV values in chronological order (empty if too short)
    """
    high_arr = np.asarray(highs, dtype=float)
    low_arr = np.asarray(lows, dtype=float)

    rsvs: list[float] = []
    for i in range(window - 1, len(closes)):
        start = i - window + 1
        highest = float(high_arr[start : i + 1].max())
        lowest = float(low_arr[start : i + 1].min())

        if highest == lowest:
            rsvs.append(KD_SEED)
        else:
            rsvs.append(100.0 * (closes[i] - lowest) / (highest - lowest))
    return rsvs


def smooth_kd(rsvs: list[float]) -> tuple[float, float]:
    """
    Recursive %K / %D smoothing

    K_n = 2/3 × K_{n-1} + 1/3 × RSV_n
    D_n = 2/3 × D_{n-1} + 1/3 × K_n
    seeded with K_0 = D_0 = 50.

    Returns:
        tuple: (K, D) after the last RSV
    """
    k = KD_SEED
    d = KD_SEED
    for rsv in rsvs:
        # Integer form keeps a neutral input at exactly 50
        k = ((KD_SMOOTHING - 1) * k + rsv) / KD_SMOOTHING
        d = ((KD_SMOOTHING - 1) * d + k) / KD_SMOOTHING
    return k, d


def calculate_kd(
    closes: list[float], highs: list[float], lows: list[float]
) -> tuple[float, float]:
    """Stochastic oscillator; neutral (50, 50) below 9 samples"""
    if len(closes) < KD_WINDOW:
        return KD_SEED, KD_SEED
    return smooth_kd(calculate_rsv_series(closes, highs, lows))


def compute(
    series: PriceSeriesDTO, quote: float | None = None
) -> TechnicalIndicatorsDTO:
    """
    Derive technical indicators from a cleaned price series

    The moving average and the oscillator have independent minimum lengths:
    9..59 samples give a valid %K / %D with ma60 = 0.

    Args:
        series: Cleaned close/high/low series, oldest first
        quote: External current price; latest close is used when None

    Returns:
        TechnicalIndicatorsDTO
    """
    validate_price_series(series)

    closes = series["close"]
    k, d = calculate_kd(closes, series["high"], series["low"])

    if quote is not None and quote > 0:
        price = float(quote)
    elif closes:
        price = float(closes[-1])
    else:
        price = 0.0

    return {
        "ma60": calculate_moving_average(closes),
        "k": k,
        "d": d,
        "price": price,
    }


def clean_price_bars(bars: list[PriceBarDTO]) -> PriceSeriesDTO:
    """
    Build a price series from raw bars

    A bar with a missing, NaN or non-positive close/high/low is dropped as a
    whole so the three sequences stay aligned by trading day.
    """
    series: PriceSeriesDTO = {"close": [], "high": [], "low": []}
    for bar in bars:
        values = (bar["close"], bar["high"], bar["low"])
        # NaN fails every comparison, so `v > 0` also filters it
        if any(v is None or not v > 0 for v in values):
            continue
        series["close"].append(float(bar["close"]))
        series["high"].append(float(bar["high"]))
        series["low"].append(float(bar["low"]))
    return series
