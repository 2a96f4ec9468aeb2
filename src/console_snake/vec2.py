class Vector2:
    """Integer grid vector. `add` mutates in place."""

    def __init__(self, x=0, y=0):
        self.x, self.y = x, y

    def add(self, other):
        self.x += other.x
        self.y += other.y

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def is_zero(self):
        return self.x == 0 and self.y == 0

    def __repr__(self):
        return (
            self.x,
            self.y,
        ).__repr__()

    def clone(self):
        return Vector2(
            self.x,
            self.y,
        )

    def to_tuple(self):
        return (self.x, self.y)
