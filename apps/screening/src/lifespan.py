"""Screening App 生命週期管理

Apps 層的 DI 配置，組合 libs 的能力
"""

import logging

from injector import Injector

from libs.screening.src.lifespan import ScreeningModule


_injector: Injector | None = None


def startup() -> Injector:
    """啟動 DI 容器"""
    global _injector

    # 抑制噪音 logger
    logging.getLogger("yfinance").setLevel(logging.CRITICAL)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    _injector = Injector([ScreeningModule()])
    return _injector


def shutdown() -> None:
    """關閉 DI 容器"""
    global _injector
    _injector = None


def get_injector() -> Injector:
    """取得 DI 容器，若未初始化則自動啟動"""
    global _injector
    if _injector is None:
        startup()
    return _injector
