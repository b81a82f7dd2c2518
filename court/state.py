class EntityState:
    __slots__ = ("x", "y", "vx", "vy", "width", "height")

    def __init__(self, x, y, vx, vy, width, height):
        self.x, self.y, self.vx, self.vy = x, y, vx, vy
        self.width, self.height = width, height

    def __eq__(self, other):
        if not isinstance(other, EntityState):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __repr__(self):
        return "EntityState(x={}, y={}, vx={}, vy={}, width={}, height={})".format(*self.to_tuple())

    def to_tuple(self):
        return (self.x, self.y, self.vx, self.vy, self.width, self.height)

    def to_dict(self):
        return {"x": self.x, "y": self.y, "vx": self.vx, "vy": self.vy,
                "width": self.width, "height": self.height}
