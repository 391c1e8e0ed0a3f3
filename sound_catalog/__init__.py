from flask import Flask
from flask_cors import CORS
from flasgger import Flasgger
from .config import config
from .logging_config import configure_logging
from .settings import AppSettings, EXTENSION_KEY
import os


def create_app(config_name=None, **overrides):
    """
    Application factory function.

    Keyword overrides are applied on top of the selected config class,
    e.g. ``create_app('testing', MUSIC_DIR=...)``.
    """
    if config_name is None:
        config_name = os.getenv('FLASK_CONFIG', 'default')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.config.update(overrides)

    configure_logging(
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        is_debug=app.config.get("DEBUG", False)
    )

    # Built once; requests only ever read it
    app.extensions[EXTENSION_KEY] = AppSettings.from_config(app.config)

    from .api import api
    app.register_blueprint(api)

    # Docstrings must be complete before Flasgger reads them
    from .api.swagger_helpers import apply_swagger_extras
    apply_swagger_extras(app)

    Flasgger(app)

    CORS(app, resources={r"/*": {"origins": "*"}})

    @app.after_request
    def set_security_headers(response):
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response

    from .cli.catalog_commands import init_catalog_commands
    init_catalog_commands(app)

    return app
