"""Grid-based raycasting explorer: .cub scene loading, rendering and a pygame game loop."""

__version__ = "0.1.0"