"""Application configuration, read from the environment (and .env)."""

import os


def _database_url():
    url = os.getenv('DATABASE_URL', 'sqlite:///translations.db')
    # Some hosts still hand out postgres:// URLs, which SQLAlchemy rejects
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


def _env_flag(name, default):
    return os.getenv(name, default).lower() in ('true', '1', 'yes')


class Config:
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    EXPORT_DIR = os.getenv('EXPORT_DIR', 'export')
    EXPORT_QUEUE_SIZE = int(os.getenv('EXPORT_QUEUE_SIZE', 100))
    EXPORT_WORKER_ENABLED = _env_flag('EXPORT_WORKER_ENABLED', 'true')
    XLIFF_SOURCE_LANGUAGE = os.getenv('XLIFF_SOURCE_LANGUAGE', 'en')

    # Turn off when the schema is managed with migrations/
    AUTO_CREATE_TABLES = _env_flag('AUTO_CREATE_TABLES', 'true')


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    EXPORT_WORKER_ENABLED = False


class ProductionConfig(Config):
    DEBUG = False


CONFIGS = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
}


def get_config(config_name):
    """Look up a config class by name, falling back to development."""
    return CONFIGS.get(config_name or 'development', DevelopmentConfig)
