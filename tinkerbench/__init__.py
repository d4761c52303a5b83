"""Small experiments: 2D geometry, Lua value types, a ring buffer, operation counting, traced pipelines and JSON property files."""

__version__ = "0.1.0"