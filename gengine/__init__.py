"""A small 2D entity-component game engine on pygame, with hierarchical transforms, cameras, resources and Tiled maps."""

__version__ = "0.1.0"