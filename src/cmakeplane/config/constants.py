"""Configuration constants.

Values here are fixed by CMake itself or by protocol limits and are NOT
user-configurable. For configurable values, see models.py.
"""

# =============================================================================
# CMake Layout
# =============================================================================

CACHE_FILENAME = "CMakeCache.txt"
"""Default cache file written by every CMake configure."""

FILE_API_DIR = ".cmake/api/v1"
"""File API root, relative to the build directory."""

CODEMODEL_QUERY = "codemodel-v2"
"""Shared stateless query name that requests the code model reply."""

PROJECT_MARKER = "CMakeLists.txt"
"""File that marks a CMake source directory."""

CONFIG_DIRNAME = ".cmakeplane"
"""Per-project config directory, relative to the source directory."""

# =============================================================================
# Protocol/Validation Constants
# =============================================================================

PORT_MIN = 0
PORT_MAX = 65535
"""Valid port range."""
