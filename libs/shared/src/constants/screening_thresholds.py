"""Screening Engine Thresholds

Fixed cut points of the three-stage screen and the composite score.
These are fixed by the algorithm; only the values in
ScreeningCriteriaDTO are tunable.
"""

# ========================================
# Technical indicators
# ========================================

MA_WINDOW = 60  # Trailing moving average window (days)
KD_WINDOW = 9  # RSV look-back window (days)
KD_SEED = 50.0  # Neutral seed for %K / %D and zero-range RSV
KD_SMOOTHING = 3  # Smoother period: new = ((n - 1) × prior + input) / n

# ========================================
# Stage 1: mandatory health (exclusion)
# ========================================

STAGE1_MIN_ROE = 0.0  # ROE <= 0 fails
STAGE1_MAX_DEBT_RATIO = 80.0  # Debt ratio >= 80 fails
STAGE1_MIN_REVENUE_GROWTH = -20.0  # Revenue growth <= -20 fails
STAGE1_MIN_YOY_GROWTH = -30.0  # YoY growth <= -30 fails
STAGE1_MIN_EPS_GROWTH = -50.0  # EPS growth <= -50 fails
STAGE1_MIN_EPS = 0.0  # EPS <= 0 fails

# ========================================
# Stage 2: quality scoring (advisory)
# ========================================

ROE_EXCELLENT = 15.0
ROE_ACCEPTABLE = 10.0
REVENUE_GROWTH_EXCELLENT = 10.0
REVENUE_GROWTH_ACCEPTABLE = 0.0
YOY_GROWTH_ACCEPTABLE = 0.0
EPS_GROWTH_ACCEPTABLE = 50.0
DEBT_RATIO_EXCELLENT = 30.0
DEBT_RATIO_ACCEPTABLE = 50.0
DIVIDEND_YEARS_EXCELLENT = 5
DIVIDEND_YEARS_ACCEPTABLE = 3

STAGE2_TOTAL_CHECKS = 7
STAGE2_PASS_RATIO = 0.6

# ========================================
# Stage 3: technical timing (advisory)
# ========================================

PRICE_MA_STRONG_PCT = 5.0
PRICE_MA_HOLDING_PCT = 0.0
KD_BUY_ZONE_LOW = 50.0
KD_BUY_ZONE_HIGH = 80.0  # inclusive
KD_WATCH_LOW = 30.0
KD_WATCH_HIGH = 90.0  # exclusive

STAGE3_TOTAL_CHECKS = 3
STAGE3_PASS_RATIO = 0.5

# ========================================
# Composite score (fundamentals max 80 / technicals max 30)
# ========================================

SCORE_ROE_CAP = 30.0
SCORE_ROE_WEIGHT = 15.0
SCORE_REVENUE_GROWTH_CAP = 20.0
SCORE_REVENUE_GROWTH_WEIGHT = 10.0
SCORE_YOY_GROWTH_CAP = 30.0
SCORE_YOY_GROWTH_WEIGHT = 15.0
SCORE_EPS_GROWTH_CAP = 200.0
SCORE_EPS_GROWTH_WEIGHT = 20.0
SCORE_EPS_CAP = 5.0
SCORE_EPS_WEIGHT = 5.0
SCORE_DEBT_RATIO_WEIGHT = 10.0  # Linear, not capped
SCORE_DIVIDEND_YEARS_CAP = 10.0
SCORE_DIVIDEND_YEARS_WEIGHT = 5.0
SCORE_PRICE_ABOVE_MA_BONUS = 15.0
SCORE_K_GOLDEN_ZONE_BONUS = 8.0
SCORE_D_GOLDEN_ZONE_BONUS = 7.0
