"""
Renderer
Per-request JSON and HTML output
"""
import json
from typing import Any

from markupsafe import Markup
from sanic.response import HTTPResponse

from sanic_render.defaults import (
    CONTENT_TYPE_HEADER,
    CONTENT_TYPE_HTML,
    CONTENT_TYPE_JSON,
    DEFAULT_ERROR_STATUS,
    DEFAULT_LAYOUT_TEMPLATE,
    YIELD_FUNCTION_NAME,
    YIELD_PLACEHOLDER,
)
from sanic_render.http.response_writer import ResponseWriter, http_error
from sanic_render.logging import getLogger
from sanic_render.view.template_set import TemplateSet

logger = getLogger(__name__)

# Raised by json.dumps for values it cannot represent
SERIALIZATION_ERRORS = (TypeError, ValueError, OverflowError, RecursionError)


class Renderer:
    """
    Writes JSON or HTML templates out to the response of one request

    A Renderer owns its ResponseWriter and a clone of the compiled
    TemplateSet; it is created by RendererFactory for every request and
    exposed on ``request.ctx.render``. Each method writes the response
    and returns the built HTTPResponse.

    Example:
        @app.get('/users/<user_id:int>')
        async def show(request, user_id):
            return request.ctx.render.html(200, 'users/show', {'id': user_id})
    """

    def __init__(self, writer: ResponseWriter, templates: TemplateSet):
        self.writer = writer
        self.templates = templates

    def json(self, status: int, value: Any) -> HTTPResponse:
        """
        Write the given status and the JSON serialized value

        Values json cannot represent (circular structures, unsupported
        types, NaN) produce a plain-text 500 instead.
        """
        try:
            result = json.dumps(value, separators=(',', ':'), allow_nan=False)
        except SERIALIZATION_ERRORS as e:
            logger.error("JSON serialization failed", extra={'error': str(e)})
            http_error(self.writer, str(e), DEFAULT_ERROR_STATUS)
            return self.response()

        self.writer.header()[CONTENT_TYPE_HEADER] = CONTENT_TYPE_JSON
        self.writer.write_header(status)
        self.writer.write(result.encode('utf-8'))
        return self.response()

    def html(self, status: int, name: str, binding: Any = None) -> HTTPResponse:
        """
        Render the layout template with the named template yielded into it

        The 'layout' template is always the one executed; its
        ``{{ yield() }}`` call renders ``name`` against the same binding.
        A failing layout produces a plain-text 500. A failing content
        template only shows up as the placeholder text inside the page.
        """
        def render_content():
            try:
                return Markup(self.templates.execute(name, binding))
            except Exception as e:
                logger.warning(
                    "Yielded template failed to render",
                    extra={'template': name, 'error': str(e)}
                )
                return YIELD_PLACEHOLDER

        self.templates.funcs({YIELD_FUNCTION_NAME: render_content})

        try:
            content = self.templates.execute(DEFAULT_LAYOUT_TEMPLATE, binding)
        except Exception as e:
            logger.error(
                "Layout template failed to render",
                extra={
                    'template': DEFAULT_LAYOUT_TEMPLATE,
                    'content_template': name,
                    'error': str(e),
                }
            )
            http_error(self.writer, str(e), DEFAULT_ERROR_STATUS)
            return self.response()

        self.writer.header()[CONTENT_TYPE_HEADER] = CONTENT_TYPE_HTML
        self.writer.write_header(status)
        self.writer.write(content.encode('utf-8'))
        return self.response()

    def error(self, status: int) -> HTTPResponse:
        """Write only the given status, no body"""
        self.writer.write_header(status)
        return self.response()

    def response(self) -> HTTPResponse:
        """Build the HTTPResponse from everything written so far"""
        return self.writer.build()
