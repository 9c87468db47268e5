"""Screening CLI 入口

遵循 P&A 架構：CLI → Driving Adapter → Application Service

Usage:
    python -m apps.screening.src.main screen
    python -m apps.screening.src.main screen --stocks=2330,2454 --min_eps=3
    python -m apps.screening.src.main roe 2330 --years=5
    python -m apps.screening.src.main history
"""

import fire

from apps.screening.src.lifespan import startup, shutdown, get_injector
from apps.screening.src.adapters.driving.cli.screening_controller import (
    ScreeningController,
)


def main() -> None:
    startup()
    try:
        fire.Fire(ScreeningController(get_injector()))
    finally:
        shutdown()


if __name__ == "__main__":
    main()
