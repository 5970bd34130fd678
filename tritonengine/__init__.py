"""A small game engine: a pyglet window, a frame loop, GLSL shader programs and a coloured logger."""

__version__ = "0.1.0"