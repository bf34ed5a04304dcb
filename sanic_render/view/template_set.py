"""
Template Set
Named collection of parsed templates produced by one compilation
"""
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Optional

from jinja2 import Template

from sanic_render.defaults import (
    BINDING_VALUE_NAME,
    YIELD_FUNCTION_NAME,
    YIELD_PLACEHOLDER,
)
from sanic_render.exceptions import TemplateNotFoundError


def yield_placeholder() -> str:
    """Compile-time stand-in for yield"""
    return YIELD_PLACEHOLDER


class TemplateSet:
    """
    Read-only mapping of template name to parsed template

    The parsed templates are never modified after compilation. Each
    instance carries its own function table, so clone() gives a request
    a set whose functions (yield) can be rebound without affecting any
    other request.

    Example:
        templates = compile_templates(Options('views'))
        request_templates = templates.clone()
        request_templates.funcs({'yield': lambda: 'content'})
        html = request_templates.execute('layout', {'title': 'Home'})
    """

    def __init__(
        self,
        name: str,
        templates: Optional[Mapping] = None,
        functions: Optional[Dict[str, Callable]] = None
    ):
        self.name = name
        self._templates = MappingProxyType(dict(templates or {}))
        self._functions = dict(functions) if functions is not None else {
            YIELD_FUNCTION_NAME: yield_placeholder,
        }

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self):
        return f'TemplateSet(name={self.name!r}, templates={len(self)})'

    def names(self) -> List[str]:
        """Registered template names, sorted"""
        return sorted(self._templates)

    def lookup(self, name: str) -> Template:
        """
        Get a parsed template by name

        Raises:
            TemplateNotFoundError: If no template is registered under name
        """
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateNotFoundError(name) from None

    def clone(self) -> 'TemplateSet':
        """Copy sharing the parsed templates but with a private function table"""
        return TemplateSet(self.name, self._templates, self._functions)

    def funcs(self, functions: Dict[str, Callable]) -> 'TemplateSet':
        """Bind functions on this instance only (chainable)"""
        self._functions.update(functions)
        return self

    def execute(self, name: str, binding: Any = None) -> str:
        """
        Render the named template against a binding value

        Raises:
            TemplateNotFoundError: If the template is not registered
            jinja2.TemplateError: If the template body fails to render
        """
        template = self.lookup(name)
        return template.render(self._build_context(binding))

    def _build_context(self, binding: Any) -> Dict[str, Any]:
        """
        Build the render context

        Mapping bindings are exposed key by key, any other value as
        'data'. Bound functions win over binding keys of the same name.
        """
        context = {}
        if isinstance(binding, Mapping):
            context.update(binding)
        elif binding is not None:
            context[BINDING_VALUE_NAME] = binding

        context.update(self._functions)
        return context
