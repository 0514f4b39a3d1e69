"""Building blocks for small 2D games: vector math, enums, game objects, AABB tests, FPS, input, states and rendering."""

__version__ = "0.1.0"

__all__ = [
    "enums",
    "fps",
    "gameobject",
    "input",
    "physics",
    "render",
    "states",
    "trigonometry",
    "utils",
    "vector_algebra",
]