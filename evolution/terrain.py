"""Ground, obstacles and background scenery that make up a level."""

from __future__ import annotations

import random

from evolution.geometry import CELL_SIZE, MAP_WIDTH, WINDOW_HEIGHT, Contact, FloatRect

_GROUND_TEXTURES = {
    1: "resources/sade.jpg",
    2: "resources/break.jpg",
    3: "resources/ground.jpg",
}

_default_rng = random.Random()

Size = tuple[float, float]


def ground_texture_for_level(level: int) -> str | None:
    """Return the ground texture for a level, or None if the level has none."""
    return _GROUND_TEXTURES.get(level)


class _TileLayer:
    def __init__(self, texture: str | None, tile_size: Size = (CELL_SIZE, CELL_SIZE)) -> None:
        self.texture = texture
        self.tile_size = tile_size
        self.tiles: list[FloatRect] = []
        self.map_data: list[list[int]] = []

    def _layout(self, col_offset: int, lift: float) -> None:
        rows = len(self.map_data)
        width, height = self.tile_size
        self.tiles = [
            FloatRect(
                (col + col_offset) * CELL_SIZE,
                row * CELL_SIZE + WINDOW_HEIGHT - rows * CELL_SIZE - lift,
                width,
                height,
            )
            for row, cells in enumerate(self.map_data)
            for col, tile in enumerate(cells)
            if tile
        ]


class Ground(_TileLayer):
    """The two-row floor of the level, with pits every ten cells."""

    def update_map(self, level: int) -> None:
        """Drop the current tiles and switch to the texture of `level`."""
        self.tiles = []
        texture = ground_texture_for_level(level)
        if texture is not None:
            self.texture = texture

    def init_map(self) -> None:
        self.map_data = [
            [0 if col % 10 == 0 and col != 0 else 1 for col in range(MAP_WIDTH)]
            for _ in range(2)
        ]

    def create_map(self) -> None:
        self._layout(0, 0.0)

    def check_collision(self, box: FloatRect) -> bool:
        """Tell whether `box` overlaps any ground tile."""
        return any(tile.intersects(box) for tile in self.tiles)


class _Obstacle(_TileLayer):
    _SHAPE: tuple[tuple[int, ...], ...] = ()
    _LIFT = 0.0
    _OFFSET_RANGE = (10, 10)

    def __init__(
        self,
        texture: str | None,
        offset: int | None = None,
        rng: random.Random | None = None,
        tile_size: Size = (CELL_SIZE, CELL_SIZE),
    ) -> None:
        super().__init__(texture, tile_size)
        if offset is None:
            offset = (rng or _default_rng).randint(*self._OFFSET_RANGE)
        self.offset = offset

    def init_map(self) -> None:
        self.map_data = [list(row) for row in self._SHAPE]

    def create_map(self) -> None:
        self._layout(self.offset, self._LIFT)

    def check_collision(self, box: FloatRect) -> Contact:
        """Return the sides of this obstacle that `box` presses against."""
        flag = Contact.NONE
        for tile in self.tiles:
            if not tile.intersects(box):
                continue
            if tile.left < box.right and box.left < tile.left and box.top > tile.top:
                flag |= Contact.RIGHT
            elif box.left < tile.right and box.right > tile.right and box.top > tile.top:
                flag |= Contact.LEFT
            if box.bottom > tile.top and box.top < tile.top:
                flag |= Contact.BOTTOM
        return flag


class Step(_Obstacle):
    """A staircase obstacle standing on the ground at a random column."""

    _SHAPE = ((0, 0, 1, 1), (0, 1, 1, 1), (1, 1, 1, 1))
    _LIFT = 2 * CELL_SIZE
    _OFFSET_RANGE = (10, MAP_WIDTH - 10)

    def init_map(self) -> None:
        super().init_map()

    def create_map(self) -> None:
        super().create_map()

    def check_collision(self, box: FloatRect) -> Contact:
        return super().check_collision(box)


class Platform(_Obstacle):
    """A floating five-tile platform at a random column."""

    _SHAPE = ((1, 1, 1, 1, 1),)
    _LIFT = 6 * CELL_SIZE
    _OFFSET_RANGE = (10, MAP_WIDTH - 15)

    def init_map(self) -> None:
        super().init_map()

    def create_map(self) -> None:
        super().create_map()

    def check_collision(self, box: FloatRect) -> Contact:
        return super().check_collision(box)


class _Backdrop(_TileLayer):
    _OFFSET = 0
    _COUNT = 5
    _SPACING = 10

    def __init__(self, texture: str | None, sprite_size: Size = (CELL_SIZE, CELL_SIZE)) -> None:
        super().__init__(texture, sprite_size)
        self.offset = self._OFFSET

    def init_map(self) -> None:
        """Scenery has no tile grid."""

    def _row_top(self) -> float:
        raise NotImplementedError

    def create_map(self) -> None:
        width, height = self.tile_size
        top = self._row_top()
        self.tiles = [
            FloatRect((i * self._SPACING + self.offset) * CELL_SIZE, top, width, height)
            for i in range(self._COUNT)
        ]

    def check_collision(self, box: FloatRect) -> Contact:
        """Scenery never blocks the character."""
        return Contact.NONE


class Cloud(_Backdrop):
    """A row of clouds drawn in the sky."""

    _OFFSET = 3

    def _row_top(self) -> float:
        return 3 * CELL_SIZE

    def init_map(self) -> None:
        """Clouds have no tile grid."""

    def create_map(self) -> None:
        super().create_map()


class Tree(_Backdrop):
    """A row of trees standing on the ground."""

    _OFFSET = 5

    def _row_top(self) -> float:
        return WINDOW_HEIGHT - 2 * CELL_SIZE - self.tile_size[1]

    def init_map(self) -> None:
        """Trees have no tile grid."""

    def create_map(self) -> None:
        super().create_map()