"""
sanic_render
JSON serialization and layout-based HTML template rendering for Sanic handlers

    from sanic import Sanic
    from sanic_render import Options, renderer

    app = Sanic('site')
    renderer(Options(directory='templates')).install(app)

    @app.get('/html')
    async def page(request):
        return request.ctx.render.html(200, 'mytemplate', {'name': 'world'})

    @app.get('/json')
    async def data(request):
        return request.ctx.render.json(200, 'hello world')
"""
from sanic_render.exceptions import (
    RenderException,
    TemplateCompileError,
    TemplateNotFoundError,
)
from sanic_render.http import ResponseWriter
from sanic_render.middleware import CompilationPolicy, RendererFactory, renderer
from sanic_render.support import Environment, Options
from sanic_render.view import Renderer, TemplateSet, compile_templates

__version__ = '0.1.0'

__all__ = [
    'RenderException',
    'TemplateCompileError',
    'TemplateNotFoundError',
    'ResponseWriter',
    'CompilationPolicy',
    'RendererFactory',
    'renderer',
    'Environment',
    'Options',
    'Renderer',
    'TemplateSet',
    'compile_templates',
]
