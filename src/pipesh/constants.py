"""Application-level constants for pipesh."""

# ============================================================================
# Application identity
# ============================================================================

APP_NAME = "pipesh"
APP_VERSION = "0.4.2"
APP_BANNER = f"{APP_NAME} interpreter v{APP_VERSION}"

# ============================================================================
# Input grammar
# ============================================================================

PIPE_TOKEN = "|"
BATCH_COMMENT_PREFIX = "#"

# ============================================================================
# Defaults
# ============================================================================

DEFAULT_PROMPT = ">> "

# Percent similarity a known name must exceed to be suggested
DEFAULT_SUGGESTION_THRESHOLD = 70.0

DEBUG_ENV_VAR = "PIPESH_DEBUG"
