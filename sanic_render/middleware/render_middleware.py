"""
Render Middleware
Owns the compiled templates and hands every request its own Renderer
"""
from typing import Callable, Optional

from sanic import Request

from sanic_render.defaults import RENDER_CONTEXT_KEY
from sanic_render.http.response_writer import ResponseWriter
from sanic_render.logging import getLogger
from sanic_render.middleware.base_middleware import Middleware
from sanic_render.support.environment import Environment, current_environment
from sanic_render.support.options import Options, prepare_options
from sanic_render.view.compiler import compile_templates
from sanic_render.view.renderer import Renderer
from sanic_render.view.template_set import TemplateSet

logger = getLogger(__name__)


class CompilationPolicy:
    """
    Decides per request whether templates are compiled again

    Development recompiles on every request so template edits show up
    without a restart. Production keeps the set compiled at startup.
    """

    def __init__(self, environment: Callable[[], Environment] = current_environment):
        self.environment = environment

    def should_recompile(self) -> bool:
        return self.environment() is Environment.DEVELOPMENT


class RendererFactory(Middleware):
    """
    Maps a Renderer onto ``request.ctx.render`` for every request

    Templates are compiled once at construction; a TemplateCompileError
    propagates to the caller so a broken template never lets a server
    start. Set APP_ENV=production to stop recompiling on every request.

    Example:
        app = Sanic('shop')
        RendererFactory(Options(directory='views')).install(app)

        @app.get('/')
        async def index(request):
            return request.ctx.render.html(200, 'home', {'title': 'Shop'})

        @app.get('/api/status')
        async def status(request):
            return request.ctx.render.json(200, {'ok': True})
    """

    def __init__(self, *options: Options, policy: Optional[CompilationPolicy] = None):
        self.options = prepare_options(*options)
        self.policy = policy or CompilationPolicy()
        self._templates = compile_templates(self.options)
        logger.info(
            "Renderer ready",
            extra={'directory': self.options.directory, 'templates': len(self._templates)}
        )

    @property
    def templates(self) -> TemplateSet:
        """Currently held compiled set"""
        return self._templates

    def renderer(self) -> Renderer:
        """Apply the compilation policy and build a Renderer on a fresh clone"""
        if self.policy.should_recompile():
            # Single reference swap; in-flight requests keep their clones
            self._templates = compile_templates(self.options)

        return Renderer(ResponseWriter(), self._templates.clone())

    async def before_request(self, request: Request):
        setattr(request.ctx, RENDER_CONTEXT_KEY, self.renderer())


def renderer(*options: Options, policy: Optional[CompilationPolicy] = None) -> RendererFactory:
    """
    Shorthand for RendererFactory(*options)

    Example:
        renderer(Options('views')).install(app)
    """
    return RendererFactory(*options, policy=policy)
