"""
Package Default Values
All hardcoded values used by the renderer are defined here
"""

# ============================================================================
# TEMPLATE DEFAULTS
# ============================================================================

DEFAULT_TEMPLATE_DIRECTORY = 'templates'
DEFAULT_TEMPLATE_EXTENSION = '.tmpl'

# Outer template every HTML render resolves
DEFAULT_LAYOUT_TEMPLATE = 'layout'

# Function name a layout calls to embed page content
YIELD_FUNCTION_NAME = 'yield'

# Returned by yield when no content is bound or the content render failed
YIELD_PLACEHOLDER = 'nope'

# Name a non-mapping binding value is exposed under inside templates
BINDING_VALUE_NAME = 'data'

# ============================================================================
# HTTP DEFAULTS
# ============================================================================

CONTENT_TYPE_HEADER = 'Content-Type'
CONTENT_TYPE_JSON = 'application/json'
CONTENT_TYPE_HTML = 'text/html'
CONTENT_TYPE_TEXT = 'text/plain; charset=utf-8'

DEFAULT_ERROR_STATUS = 500
DEFAULT_SUCCESS_STATUS = 200

# Attribute on request.ctx holding the per-request renderer
RENDER_CONTEXT_KEY = 'render'

# ============================================================================
# ENVIRONMENT DEFAULTS
# ============================================================================

APP_ENV_KEY = 'APP_ENV'
DEFAULT_APP_ENV = 'development'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOGGER_NAME = 'sanic_render'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
