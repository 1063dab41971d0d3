import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Config:
    """Base configuration."""
    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Development server
    HOST = os.environ.get('HOST', '127.0.0.1')
    PORT = int(os.environ.get('PORT', 5000))
    DEBUG = os.environ.get('FLASK_DEBUG', 'false').lower() == 'true'

    # Keep launcher rows in title/arg/subtitle/valid order
    JSON_SORT_KEYS = False


class TestConfig(Config):
    """Configuration used by the test suite."""
    TESTING = True
    LOG_LEVEL = 'DEBUG'
