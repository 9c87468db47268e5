"""External Request Settings

All fetch adapters share these values to avoid rate limits (429).
"""

# Delay seconds between two screened candidates
SCREENING_DELAY_SECONDS: float = 1.0

# Timeout for TWSE / FinMind HTTP requests
HTTP_TIMEOUT_SECONDS: float = 30.0

# yfinance history period (MA60 needs at least 60 trading days)
PRICE_HISTORY_PERIOD: str = "6mo"

# FinMind look-back for quarterly statements (8 quarters + buffer)
STATEMENT_LOOKBACK_DAYS: int = 3 * 365

# FinMind look-back for dividend history
DIVIDEND_LOOKBACK_YEARS: int = 15
