from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from .common.web import register_error_handlers
from .config import get_settings_module
from .container import build_container
from .core.logger import configure, get_logger
from .dashboard.controller import register as register_dashboard
from .events.controller import register as register_events
from .payments.controller import register as register_payments
from .store.memory_store import InMemoryEntityStore

log = get_logger(__name__)


def create_app(*, store: InMemoryEntityStore | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure(getattr(settings, "LOG_LEVEL", "INFO"))

    log.info("settings=%s data_dir=%s", settings_module, getattr(settings, "DATA_DIR", "-"))

    container = build_container(settings=settings, store=store)

    register_error_handlers(app)
    register_dashboard(app, container)
    register_events(app, container)
    register_payments(app, container)

    return app
