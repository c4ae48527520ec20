"""
Redwood Default Values
All hardcoded values should be defined here and accessed via Config.get()
This file contains sensible defaults that can be overridden in .redwood.yaml
"""

# ============================================================================
# PROJECT DEFAULTS
# ============================================================================

CONFIG_FILE_NAME = '.redwood.yaml'
ENV_FILE_NAME = '.env'

DEFAULT_APP_ENV = 'local'
DEFAULT_SOURCE_DIR = 'src'
DEFAULT_OUTPUT_DIR = 'build'

# ============================================================================
# VIEW COMPONENT DEFAULTS
# ============================================================================

# Keys are the view component kinds, values are component folder names
VIEW_FOLDERS = {
    'page': 'pages',
    'context': 'contexts',
    'partial': 'partials',
    'layout': 'layouts',
}

TEMPLATE_EXTENSION = '.html'
CODE_EXTENSION = '.py'

VIEW_EXTENSIONS = {
    'page': TEMPLATE_EXTENSION,
    'context': CODE_EXTENSION,
    'partial': TEMPLATE_EXTENSION,
    'layout': TEMPLATE_EXTENSION,
}

# Joins the namespace segment to the rest of a context class name
CONTEXT_NAMESPACE_SEPARATOR = ''

# Name under which a layout receives the rendered page
LAYOUT_CONTENT_VARIABLE = 'content'

TEMPLATE_ENCODING = 'utf-8'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_FORMAT = 'text'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
