#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2jira.

This module centralizes the hardcoded values used across the library:

1. Dependencies - Package requirements checked at runtime
2. Parser Defaults - Markdown extension switches
3. Renderer Defaults - JIRA output switches and markers
4. CLI and Configuration - Environment prefix and config file names
"""

from __future__ import annotations

# =============================================================================
# Dependencies
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_TASK_LISTS = True
DEFAULT_PARSE_AUTOLINKS = True
DEFAULT_PARSE_FRONTMATTER = False

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_PRESERVE_RAW_HTML = False
DEFAULT_WARN_ON_UNSUPPORTED = False
DEFAULT_VERBOSE = False

# Language tag meaning "emit a plain {code} block"
NO_LANGUAGE = "none"

HTML_BLOCK_WARNING = "HTML block found - converted with best effort"

# =============================================================================
# CLI and Configuration
# =============================================================================

ENV_PREFIX = "MD2JIRA_"
ENV_CONFIG_VAR = "MD2JIRA_CONFIG"

CONFIG_FILENAMES = [".md2jira.toml", ".md2jira.yaml", ".md2jira.yml", ".md2jira.json"]
PYPROJECT_TOOL_SECTION = "md2jira"
