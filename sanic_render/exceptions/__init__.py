"""
Exceptions Package
"""
from sanic_render.exceptions.custom import (
    RenderException,
    TemplateCompileError,
    TemplateNotFoundError,
)

__all__ = [
    'RenderException',
    'TemplateCompileError',
    'TemplateNotFoundError',
]
