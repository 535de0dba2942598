"""CMakePlane - CMake project queries for AI coding agents."""

__version__ = "0.1.0"
