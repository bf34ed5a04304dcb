"""
Template Compiler
Walks a template directory and parses every .tmpl file into a TemplateSet
"""
import os
from pathlib import PurePath
from typing import Dict

from jinja2 import DictLoader, Environment, TemplateSyntaxError

from sanic_render.defaults import DEFAULT_TEMPLATE_EXTENSION, YIELD_FUNCTION_NAME
from sanic_render.exceptions import TemplateCompileError
from sanic_render.logging import getLogger
from sanic_render.support.options import Options, prepare_options
from sanic_render.view.template_set import TemplateSet, yield_placeholder

logger = getLogger(__name__)


class Compiler:
    """
    One full directory walk + parse pass

    Templates are registered under their path relative to the root
    directory, extension stripped, with forward slashes:
    ``templates/admin/users.tmpl`` becomes ``admin/users``.

    All templates of one pass share a Jinja2 environment whose loader
    serves the sources read so far, so ``{% include 'partials/nav' %}``
    resolves against the same set.
    """

    def __init__(self, options: Options = None):
        self.options = prepare_options(options) if options else prepare_options()
        self.extension = DEFAULT_TEMPLATE_EXTENSION

    def compile(self) -> TemplateSet:
        """
        Build a TemplateSet from the configured directory

        Raises:
            TemplateCompileError: On the first parse, read or walk failure
        """
        root = self.options.directory
        sources: Dict[str, str] = {}
        environment = self._create_environment(sources)
        templates = {}

        if not os.path.isdir(root):
            logger.warning(
                "Template directory not found, compiled an empty template set",
                extra={'directory': root}
            )
            return TemplateSet(root)

        for dirpath, dirnames, filenames in os.walk(root, onerror=self._walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                path = os.path.join(dirpath, filename)
                relative = os.path.relpath(path, root)
                stem, ext = os.path.splitext(relative)
                if ext != self.extension:
                    continue

                name = template_name(stem)
                sources[name] = self._read(path)
                templates[name] = self._parse(environment, name, path)

        logger.debug(
            "Compiled templates",
            extra={'directory': root, 'count': len(templates)}
        )
        return TemplateSet(root, templates)

    def _create_environment(self, sources: Dict[str, str]) -> Environment:
        environment = Environment(
            loader=DictLoader(sources),
            autoescape=True,
            keep_trailing_newline=True,
            cache_size=-1,
            auto_reload=False,
        )
        environment.globals[YIELD_FUNCTION_NAME] = yield_placeholder
        return environment

    @staticmethod
    def _read(path: str) -> str:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateCompileError(f"{path}: {e}", path=path) from e

    @staticmethod
    def _parse(environment: Environment, name: str, path: str):
        try:
            return environment.get_template(name)
        except TemplateSyntaxError as e:
            raise TemplateCompileError(
                f"{path}:{e.lineno}: {e.message}", path=path
            ) from e

    @staticmethod
    def _walk_error(error: OSError):
        raise TemplateCompileError(
            f"{error.filename}: {error.strerror}", path=error.filename
        ) from error


def template_name(relative_stem: str) -> str:
    """Canonical forward-slash name for a relative path without extension"""
    return PurePath(relative_stem).as_posix()


def compile_templates(options: Options = None) -> TemplateSet:
    """
    Compile the template directory described by options

    Example:
        templates = compile_templates(Options(directory='views'))
        templates.names()  # ['admin/users', 'layout', ...]
    """
    return Compiler(options).compile()
