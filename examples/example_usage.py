"""Example: compose dashboards through the service layer (no Flask).

Controllers are a thin layer; the logic lives in the composer and the
statistics modules.
"""

import importlib
from datetime import datetime

from school_dashboard.config import get_settings_module
from school_dashboard.container import build_container
from school_dashboard.users.model import Viewer


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    now = datetime(2024, 3, 15, 9, 0)

    for user in container.store.users:
        vm = container.composer.compose(Viewer.from_user(user), container.store, now)
        print(user.full_name, type(vm).__name__, "issues:", len(vm.issues))

    parent = Viewer.from_user(container.store.get_user("p_1"))
    vm = container.composer.compose(parent, container.store, now)
    print("weekly attendance:", vm.weekly_attendance)
    print("payments:", vm.payment_summary)


if __name__ == "__main__":
    main()
