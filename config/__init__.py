"""Settings modules, one per environment, selected with APP_ENV."""

import os

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").strip().lower()
    # Anything unrecognised falls back to development settings
    return _ENV_MODULES.get(env, "config.development")
