"""A small software rasterizer: vectors, matrices, meshes, shaders and a triangle pipeline."""

__version__ = "0.1.0"