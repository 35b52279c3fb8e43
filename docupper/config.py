"""
docupper Configuration
Values come from environment variables with local defaults
"""
import os
from typing import Optional

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_FONT_PATH = os.path.join(PACKAGE_DIR, "fonts", "DejaVuSans.ttf")


def env_flag(name: str, default: str = "0") -> bool:
    """Read a boolean flag from the environment"""
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration"""
    # Flask
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-in-production")

    # Storage
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", "uploads")
    OUTPUT_FOLDER = os.environ.get("OUTPUT_FOLDER", "outputs")
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_UPLOAD_MB", "50")) * 1024 * 1024

    # Generated files are deleted once sent unless retained
    RETAIN_OUTPUTS = env_flag("RETAIN_OUTPUTS")
    OUTPUT_TTL_SECONDS = int(os.environ.get("OUTPUT_TTL_SECONDS", "3600"))

    # PDF rendering
    PDF_FONT_PATH = os.environ.get("PDF_FONT_PATH", DEFAULT_FONT_PATH)
    PDF_FONT_NAME = os.environ.get("PDF_FONT_NAME", "DejaVuSans")

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Server
    PORT = int(os.environ.get("PORT", "3000"))

    # App Version
    APP_VERSION = os.environ.get("APP_VERSION", "2026.10")
    BUILD_TIME = os.environ.get("BUILD_TIME", "")
    GIT_COMMIT = os.environ.get("GIT_COMMIT", "")


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", "/tmp/docupper_uploads")
    OUTPUT_FOLDER = os.environ.get("OUTPUT_FOLDER", "/tmp/docupper_outputs")


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    RETAIN_OUTPUTS = False


# Config dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env: Optional[str] = None):
    """Get configuration class for environment"""
    env = env or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
