"""
Application Environment
Two-valued process mode gating template recompilation
"""
from enum import Enum

from sanic_render.defaults import APP_ENV_KEY, DEFAULT_APP_ENV
from sanic_render.support.env_helper import EnvHelper


class Environment(Enum):
    DEVELOPMENT = 'development'
    PRODUCTION = 'production'

    @classmethod
    def from_value(cls, value: str) -> 'Environment':
        """
        Map a raw APP_ENV value to a mode

        Unset or empty counts as development; anything that is not
        'development' counts as production.
        """
        if not value or value.strip().lower() == cls.DEVELOPMENT.value:
            return cls.DEVELOPMENT
        return cls.PRODUCTION


def current_environment() -> Environment:
    """Read the mode from APP_ENV (re-read on every call)"""
    return Environment.from_value(EnvHelper.get(APP_ENV_KEY, DEFAULT_APP_ENV))
