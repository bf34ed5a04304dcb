"""
Support Classes
"""

from sanic_render.support.env_helper import EnvHelper
from sanic_render.support.environment import Environment, current_environment
from sanic_render.support.options import Options, prepare_options

__all__ = [
    'EnvHelper',
    'Environment',
    'current_environment',
    'Options',
    'prepare_options',
]
