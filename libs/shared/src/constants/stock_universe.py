"""Default Taiwan Stock Universe

Popular TSE listings used when no explicit stock list is given.
"""

TW_WATCHLIST: dict[str, str] = {
    "2330": "台積電",
    "2454": "聯發科",
    "2308": "台達電",
    "2886": "兆豐金",
    "2884": "玉山金",
    "2382": "廣達",
    "3231": "緯創",
    "2376": "技嘉",
    "2449": "京元電",
    "1216": "統一",
    "2412": "中華電",
    "0050": "元大台灣50",
    "0056": "元大高股息",
    "2603": "長榮",
    "2609": "陽明",
    "2881": "富邦金",
    "2882": "國泰金",
    "2892": "第一金",
    "3008": "大立光",
    "2317": "鴻海",
}

# Codes traded on the OTC market (Yahoo suffix .TWO)
TW_OTC_CODES: frozenset[str] = frozenset({"6000", "6005"})
