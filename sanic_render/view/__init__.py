"""
View Package
Template compilation and per-request rendering
"""
from sanic_render.view.template_set import TemplateSet
from sanic_render.view.compiler import Compiler, compile_templates, template_name
from sanic_render.view.renderer import Renderer

__all__ = [
    'TemplateSet',
    'Compiler',
    'compile_templates',
    'template_name',
    'Renderer',
]
