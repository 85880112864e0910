import logging

from flask import Flask, jsonify

from .config import Config
from .extensions import cors, init_records
from .storage.json_store import DocumentStore, JsonStore

__version__ = "0.2.0"


def _register_error_handlers(app: Flask):
    def _empty(code):
        def handler(_e):
            return jsonify({}), code
        return handler

    for code in (404, 405, 500):
        app.register_error_handler(code, _empty(code))


def create_app(config_class: type[Config] = Config, store: DocumentStore | None = None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Logging
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    if not app.debug:
        logging.getLogger("werkzeug").setLevel(logging.WARNING)

    # JSON output: two-space indent, keys in stored order
    app.json.compact = False
    app.json.sort_keys = False

    # Extensions
    cors.init_app(
        app,
        send_wildcard=True,
        always_send=True,
        methods=app.config["CORS_ALLOW_METHODS"],
        allow_headers=app.config["CORS_ALLOW_HEADERS"],
    )
    if store is None:
        store = JsonStore(app.config["DATA_FILE"])
    init_records(app, store)

    _register_error_handlers(app)

    # Blueprints
    from .routes.collections import bp as collections_bp

    app.register_blueprint(collections_bp)

    return app
