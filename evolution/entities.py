"""Interactive level objects: the finish flag, collectable tools and monsters."""

from __future__ import annotations

from evolution.geometry import (
    CELL_SIZE,
    MAP_PIXEL_WIDTH,
    NUM_MONSTERS,
    NUM_TOOLS,
    WINDOW_HEIGHT,
    FloatRect,
)
from evolution.role import Role

FINISH_TEXTURE = "resources/fin.png"
TOOL_TEXTURE = "resources/mais.png"

Size = tuple[float, float]


class Finish:
    """The end point of a level; touching it completes the level."""

    def __init__(self, texture: str = FINISH_TEXTURE, size: Size = (CELL_SIZE, CELL_SIZE)) -> None:
        self.texture = texture
        width, height = size
        self.bounds = FloatRect(
            MAP_PIXEL_WIDTH - CELL_SIZE, WINDOW_HEIGHT - 3 * CELL_SIZE, width, height
        )

    def collide(self, role: Role) -> bool:
        """Mark the role as finished and send it back to the start if it touches the flag."""
        if not self.bounds.intersects(role.bound_box()):
            return False
        role.finished = True
        role.restart()
        return True


class Tool:
    """Items laid out in two rows that the character can pick up."""

    OFFSET = 8

    def __init__(self, texture: str = TOOL_TEXTURE, size: Size = (CELL_SIZE, CELL_SIZE)) -> None:
        self.texture = texture
        self.size = size
        self.tiles: list[FloatRect] = []

    def create(self) -> None:
        """Lay out a fresh set of items."""
        width, height = self.size
        upper = [
            FloatRect((i * 5 + self.OFFSET + 2) * CELL_SIZE, WINDOW_HEIGHT - 8 * CELL_SIZE, width, height)
            for i in range(NUM_TOOLS)
        ]
        lower = [
            FloatRect((i * 5 + self.OFFSET) * CELL_SIZE, WINDOW_HEIGHT - 3 * CELL_SIZE, width, height)
            for i in range(NUM_TOOLS)
        ]
        self.tiles = upper + lower

    def collide(self, role: Role) -> bool:
        """Pick up the first item the role touches; tell whether one was taken."""
        box = role.bound_box()
        for index, tile in enumerate(self.tiles):
            if tile.intersects(box):
                del self.tiles[index]
                return True
        return False


class Monster:
    """A row of creatures that drift left and send the character back to the start."""

    OFFSET = 15
    SPEED = (-3.0, 0.0)

    def __init__(self, texture: str | None = None, size: Size = (CELL_SIZE, CELL_SIZE)) -> None:
        self.texture = texture
        self.size = size
        self.tiles: list[FloatRect] = []

    def create(self) -> None:
        """Place the creatures at their starting columns."""
        width, height = self.size
        self.tiles = [
            FloatRect((i * 5 + self.OFFSET) * CELL_SIZE, WINDOW_HEIGHT - 3 * CELL_SIZE, width, height)
            for i in range(NUM_MONSTERS)
        ]

    def collide(self, role: Role) -> bool:
        """Restart the role if it touches any creature; tell whether it did."""
        box = role.bound_box()
        if any(tile.intersects(box) for tile in self.tiles):
            role.restart()
            return True
        return False

    def move(self, elapsed: float) -> None:
        """Advance every creature by `elapsed` seconds."""
        dx, dy = self.SPEED
        self.tiles = [tile.moved(dx * elapsed, dy * elapsed) for tile in self.tiles]