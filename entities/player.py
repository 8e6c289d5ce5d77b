"""
Player entity - the box steered through the maze
"""


class Player:
    """
    Player box with continuous position and velocity (pixels, pixels/frame)
    """
    def __init__(self, x, y, width, height):
        self.x = float(x)
        self.y = float(y)
        self.vx = 0.0
        self.vy = 0.0
        self.width = width
        self.height = height

    @property
    def position(self):
        return self.x, self.y

    @property
    def velocity(self):
        return self.vx, self.vy

    @property
    def rect(self):
        """(x, y, w, h) bounding box"""
        return (self.x, self.y, self.width, self.height)

    def reset_position(self, x, y):
        """Place player and stop it"""
        self.x = float(x)
        self.y = float(y)
        self.vx = 0.0
        self.vy = 0.0

    def __repr__(self):
        return f"Player(pos=({self.x:.1f},{self.y:.1f}), vel=({self.vx:.2f},{self.vy:.2f}))"
