from flask import Flask
import logging
from config import Config

logger = logging.getLogger(__name__)

def create_app(config_class=Config):
    """
    Application factory pattern.
    Creates and configures the Flask instance serving the link cleaner API.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    # Flask >= 2.3 reads sorting from the JSON provider, not the config key
    app.json.sort_keys = app.config.get('JSON_SORT_KEYS', False)

    # Register Blueprints
    from linkcleaner.routes.views import bp as main_bp

    app.register_blueprint(main_bp)

    logger.debug(f"Link cleaner app created with {config_class.__name__}")
    return app
