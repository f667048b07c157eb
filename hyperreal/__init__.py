"""Core building blocks of a small 2D game engine: events, layers, input, cameras, buffers, shader files, logging and profiling."""

__version__ = "0.1.0"