"""Stock Symbol Converter

Internal symbols are bare exchange codes ("2330", "00631L").
Yahoo Finance needs a market suffix:
- TSE listings: "2330.TW"
- OTC listings: "6000.TWO"
"""

from libs.shared.src.constants.stock_universe import TW_OTC_CODES


def to_yahoo_symbol(symbol: str, otc_codes: frozenset[str] = TW_OTC_CODES) -> str:
    """Convert internal stock symbol to Yahoo Finance format

    Examples:
        >>> to_yahoo_symbol("2330")
        '2330.TW'
        >>> to_yahoo_symbol("6000")
        '6000.TWO'
        >>> to_yahoo_symbol("2330.TW")  # Already Yahoo format
        '2330.TW'
    """
    if symbol.endswith(".TW") or symbol.endswith(".TWO"):
        return symbol
    if symbol in otc_codes:
        return f"{symbol}.TWO"
    return f"{symbol}.TW"


def to_internal_symbol(symbol: str) -> str:
    """Strip the .TW / .TWO suffix

    Examples:
        >>> to_internal_symbol("2330.TW")
        '2330'
        >>> to_internal_symbol("6000.TWO")
        '6000'
    """
    if symbol.endswith(".TWO"):
        return symbol[:-4]
    if symbol.endswith(".TW"):
        return symbol[:-3]
    return symbol


def normalize_symbol_list(symbols: list[str] | tuple | str | int) -> list[str]:
    """Normalize CLI input into internal symbols

    fire turns "2330" into int and "2330,2454" into a tuple.
    """
    if isinstance(symbols, (str, int)):
        symbols = str(symbols).split(",")
    return [to_internal_symbol(str(s).strip()) for s in symbols if str(s).strip()]
