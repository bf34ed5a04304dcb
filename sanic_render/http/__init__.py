"""
HTTP Module
"""
from sanic_render.http.response_writer import ResponseWriter, http_error

__all__ = [
    'ResponseWriter',
    'http_error',
]
