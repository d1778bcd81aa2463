"""A small path-tracing renderer with materials, textures and preset scenes."""

__version__ = "1.0.0"