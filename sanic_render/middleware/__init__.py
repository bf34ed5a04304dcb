"""
Middleware Package
"""
from sanic_render.middleware.base_middleware import Middleware
from sanic_render.middleware.render_middleware import (
    CompilationPolicy,
    RendererFactory,
    renderer,
)

__all__ = [
    'Middleware',
    'CompilationPolicy',
    'RendererFactory',
    'renderer',
]
