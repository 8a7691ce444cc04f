from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .leave.controller import register as register_leave
from .metrics.controller import register as register_metrics
from .personnel.controller import register as register_personnel


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger("leave_tracker")

    if container is None:
        backend = str(getattr(settings, "STORE_BACKEND", "memory"))
        logger.info("settings=%s store=%s", settings_module, backend)
        container = build_container(
            backend=backend,
            data_file=getattr(settings, "DATA_FILE", None),
            db_config=getattr(settings, "DB_CONFIG", None),
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
            window_days=int(getattr(settings, "WINDOW_DAYS", 30)),
        )

    register_personnel(app, container)
    register_leave(app, container)
    register_metrics(app, container)

    return app
