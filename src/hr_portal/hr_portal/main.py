from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, abort, redirect, send_from_directory, url_for

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_UPLOAD_URL_PREFIX
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .storage.uploads import LocalUploadStorage
from .timesheets.controller import register as register_timesheets

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(
    container: Optional[Container] = None,
    *,
    settings_module: Optional[str] = None,
    upload_dir: Optional[str | Path] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = getattr(settings, "MAX_CONTENT_LENGTH", None)
    app.config["UPLOAD_URL_PREFIX"] = getattr(settings, "UPLOAD_URL_PREFIX", DEFAULT_UPLOAD_URL_PREFIX)
    app.config["UPLOAD_DIR"] = str(upload_dir or getattr(settings, "UPLOAD_DIR"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        container = build_container(db_config=db_config, upload_dir=app.config["UPLOAD_DIR"])
        logger.info("[hr-portal] settings=%s db=%s", settings_module, container.conn.config.describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn, schema_path=SCHEMA_PATH)
            logger.info("[hr-portal] schema ready (tables=%d)", len(list_tables(container.conn)))

    if isinstance(container.storage, LocalUploadStorage):
        app.config["UPLOAD_DIR"] = str(container.storage.root)

    register_employees(app, container)
    register_timesheets(app, container)

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("employees_list"))

    @app.route(f"{app.config['UPLOAD_URL_PREFIX'].rstrip('/')}/<path:filename>", endpoint="uploads")
    def uploads(filename: str):
        upload_root = Path(app.config["UPLOAD_DIR"])
        if not upload_root.is_dir():
            abort(404)
        return send_from_directory(upload_root.resolve(), filename)

    return app
