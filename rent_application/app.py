"""
Rent Schedule Application
Flask application exposing the monthly rent schedule calculation
"""

from flask import Flask
from flask_cors import CORS
import os
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Import configuration
from rent_application.config import Config, config

# Import blueprints
from rent_application.calculate_backend import rent_bp


def setup_logging(log_dir: Path, max_bytes: int = Config.LOG_MAX_BYTES, backup_count: int = Config.LOG_BACKUP_COUNT):
    """Setup application logging"""
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    log_file = log_dir / 'rent_app.log'

    # create_app may run more than once per process (tests)
    for handler in root_logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == os.path.abspath(log_file):
            return root_logger

    log_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # File handler with rotation
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count
    )
    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(logging.DEBUG)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(logging.INFO)

    # Configure root logger
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return root_logger


def create_app(config_name=None):
    """Application factory pattern"""
    app = Flask(__name__)

    # Load configuration
    config_name = config_name or os.environ.get('FLASK_ENV', 'default')
    app.config.from_object(config.get(config_name, config['default']))

    # Setup logging
    logger = setup_logging(
        Path(app.config['LOG_DIR']),
        app.config['LOG_MAX_BYTES'],
        app.config['LOG_BACKUP_COUNT']
    )
    logger.info("🚀 Initializing Rent Schedule Application...")

    # Initialize CORS
    cors_origins = app.config.get('CORS_ORIGINS', ['*'])
    if isinstance(cors_origins, str):
        cors_origins = cors_origins.split(',')

    CORS(app,
         resources={r"/api/*": {"origins": cors_origins, "methods": ["GET", "POST", "OPTIONS"], "allow_headers": ["Content-Type"]}})

    # Register blueprints
    app.register_blueprint(rent_bp)
    logger.info("✅ Blueprints registered")

    logger.info("✅ Application created successfully")
    return app


if __name__ == '__main__':
    app = create_app()
    logger = logging.getLogger(__name__)

    logger.info("══════════════════════════════════════════════════════════════")
    logger.info("   📊 Rent Schedule Service - Starting Server")
    logger.info("══════════════════════════════════════════════════════════════")
    logger.info(f"📍 API Endpoint: http://{Config.API_HOST}:{Config.API_PORT}/api/")
    logger.info("   - /api/rent_schedule - Monthly rent schedule")
    logger.info("   - /api/health - Health check")
    logger.info(f"📝 Logs: {app.config['LOG_DIR']}/rent_app.log")
    logger.info("══════════════════════════════════════════════════════════════")

    app.run(
        debug=app.config['DEBUG'],
        host=Config.API_HOST,
        port=Config.API_PORT
    )
