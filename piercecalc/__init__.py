# LOGGING MUST BE CONFIGURED BEFORE ANY OTHER IMPORTS OR LOGGING USAGE
import logging
from piercecalc import config

_log_handlers = [logging.StreamHandler()]
if config.LOG_FILE:
    _log_handlers.append(logging.FileHandler(config.LOG_FILE, encoding='utf-8'))
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=_log_handlers
)

import traceback
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config['SNAP_PRECISION'] = config.SNAP_PRECISION
    app.config['LOOP_ORDERING'] = config.LOOP_ORDERING
    app.config['MAX_CONTENT_LENGTH'] = config.MAX_CONTENT_LENGTH
    app.config['CORS_ORIGINS'] = config.CORS_ORIGINS
    app.config['PORT'] = config.PORT

    if config_overrides:
        app.config.update(config_overrides)

    from piercecalc.utils.loops import ORDERINGS
    if app.config['LOOP_ORDERING'] not in ORDERINGS:
        raise ValueError(f"Invalid LOOP_ORDERING: {app.config['LOOP_ORDERING']!r}. Allowed: {ORDERINGS}")

    CORS(
        app,
        origins=app.config['CORS_ORIGINS'],
        methods=['GET', 'HEAD', 'PUT', 'PATCH', 'POST', 'DELETE'],
        allow_headers=['Content-Type', 'Accept']
    )
    logging.info(f"SNAP_PRECISION={app.config['SNAP_PRECISION']}, LOOP_ORDERING={app.config['LOOP_ORDERING']}")

    # Error Handler
    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return e
        tb = traceback.format_exc()
        logging.error(f"Exception: {e}\nTraceback:\n{tb}")
        return jsonify({"error": f"Internal server error: {e}"}), 500

    # Register blueprints
    from .routes.upload import upload_bp
    app.register_blueprint(upload_bp)

    for rule in app.url_map.iter_rules():
        logging.debug(f"Registered route: {rule.rule} | methods={rule.methods} | endpoint={rule.endpoint}")

    return app
