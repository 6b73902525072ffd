"""A small 2D solar-system demo: vectors, matrices, transforms, a camera and a pygame renderer."""

__version__ = "0.1.0"