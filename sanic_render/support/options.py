"""
Renderer Options
"""
from dataclasses import dataclass, replace
from typing import Optional

from sanic_render.defaults import DEFAULT_TEMPLATE_DIRECTORY


@dataclass(frozen=True)
class Options:
    """
    Renderer configuration

    Attributes:
        directory: Root path scanned for template files
    """
    directory: Optional[str] = None


def prepare_options(*options: Options) -> Options:
    """
    Pick the first supplied Options and fill in defaults

    Example:
        opt = prepare_options()                   # directory='templates'
        opt = prepare_options(Options('views'))   # directory='views'
    """
    opt = options[0] if options else Options()

    if not opt.directory:
        opt = replace(opt, directory=DEFAULT_TEMPLATE_DIRECTORY)

    return opt
