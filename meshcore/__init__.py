"""Building blocks for polygon mesh tools: properties, timing, memory usage,
barycentric coordinates, tessellation, color maps and trackball camera math."""

__version__ = "0.1.0"

__all__ = [
    "barycentric",
    "exceptions",
    "help_items",
    "memory_usage",
    "properties",
    "stopwatch",
    "tessellation",
    "textures",
    "trackball",
]