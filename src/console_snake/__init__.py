from .food import Food
from .snake import BodySegment, Snake
from .vec2 import Vector2

__all__ = ["BodySegment", "Food", "Snake", "Vector2"]
