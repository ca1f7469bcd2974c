"""A small physically based path tracer for sphere scenes, with a JPEG-writing command."""

__version__ = "0.1.0"