"""
Custom Exception Classes
Renderer-specific exceptions with HTTP status codes
"""
from typing import Optional


class RenderException(Exception):
    """Base exception for all renderer exceptions"""
    status_code = 500
    message = "An error occurred while rendering"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class TemplateCompileError(RenderException):
    """
    Template compilation failed

    Raised when a template cannot be parsed, or when the template
    directory cannot be walked or read. Compilation stops at the first
    failure; callers starting a server should treat this as fatal.

    Example:
        try:
            templates = compile_templates(Options('views'))
        except TemplateCompileError as e:
            sys.exit(str(e))
    """
    message = "Template compilation failed"

    def __init__(self, message: Optional[str] = None, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class TemplateNotFoundError(RenderException):
    """
    Template lookup failed

    Raised when executing a template name that is not registered
    in the template set.
    """
    message = "Template not found"

    def __init__(self, name: str):
        super().__init__(f'template "{name}" is not defined')
        self.name = name
