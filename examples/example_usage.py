"""Example: use the service layer without Flask.

Prints today's attendance report for the roster stored in the local snapshot.
"""

import importlib

from config import get_settings_module

from src.roster_manager.roster_manager.common.datetime_utils import today_iso
from src.roster_manager.roster_manager.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    print(container.analytics_service.daily_report(today_iso()))
    print(container.analytics_service.staffing().recommendation)


if __name__ == "__main__":
    main()
