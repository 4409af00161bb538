from __future__ import annotations

from dataclasses import dataclass

from .dashboard.composer import DashboardComposer, DashboardSettings
from .store.loader import load_store
from .store.memory_store import InMemoryEntityStore


@dataclass(frozen=True)
class Container:
    store: InMemoryEntityStore
    composer: DashboardComposer


def settings_from_module(settings) -> DashboardSettings:
    """Read dashboard knobs from a settings module, keeping defaults for missing ones."""
    defaults = DashboardSettings()
    return DashboardSettings(
        upcoming_horizon_days=int(getattr(settings, "UPCOMING_HORIZON_DAYS", defaults.upcoming_horizon_days)),
        due_soon_days=int(getattr(settings, "DUE_SOON_DAYS", defaults.due_soon_days)),
        attendance_window_days=int(getattr(settings, "ATTENDANCE_WINDOW_DAYS", defaults.attendance_window_days)),
        term_months=int(getattr(settings, "TERM_MONTHS", defaults.term_months)),
        cell_event_cap=int(getattr(settings, "CELL_EVENT_CAP", defaults.cell_event_cap)),
        recent_payments_limit=int(getattr(settings, "RECENT_PAYMENTS_LIMIT", defaults.recent_payments_limit)),
    )


def build_container(*, settings, store: InMemoryEntityStore | None = None) -> Container:
    if store is None:
        store = load_store(getattr(settings, "DATA_DIR"))
    composer = DashboardComposer(settings_from_module(settings))
    return Container(store=store, composer=composer)
