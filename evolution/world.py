"""Level state and per-frame game logic, independent of any display."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass

from evolution.entities import FINISH_TEXTURE, TOOL_TEXTURE, Finish, Monster, Tool
from evolution.geometry import (
    CELL_SIZE,
    MAP_PIXEL_WIDTH,
    NUM_TOOLS,
    WINDOW_WIDTH,
    Contact,
)
from evolution.role import Controls, Role
from evolution.terrain import Cloud, Ground, Platform, Step, Tree

ROLE_TEXTURE = "resources/role.png"
LAST_LEVEL = 3
SCROLL_THRESHOLD = 100.0

Size = tuple[float, float]
Sizer = Callable[[str], Size]


@dataclass(frozen=True)
class LevelTheme:
    """Textures used by the scenery of one level."""

    obstacle_texture: str
    tree_texture: str
    monster_texture: str
    cloud_texture: str = "resources/Cloud.png"


_THEMES = {
    1: LevelTheme("resources/wood.png", "resources/xian.png", "resources/bee.png"),
    2: LevelTheme("resources/stone.jpg", "resources/tree.png", "resources/huang.png"),
    3: LevelTheme("resources/fe.jpg", "resources/light.png", "resources/mouse.png"),
}


def theme_for_level(level: int) -> LevelTheme | None:
    """Return the scenery textures of a level, or None for the menu or unknown levels."""
    return _THEMES.get(level)


def _cell_size(_texture: str) -> Size:
    return (CELL_SIZE, CELL_SIZE)


class World:
    """Everything in play: the character, the level layout and the camera."""

    def __init__(self, rng: random.Random | None = None, sizer: Sizer | None = None) -> None:
        self.rng = rng or random.Random()
        self.sizer = sizer or _cell_size
        self.level = 0
        self.tools_collected = 0
        self.role = Role(*self.sizer(ROLE_TEXTURE))
        self.ground = Ground(None)
        self.finish = Finish(size=self.sizer(FINISH_TEXTURE))
        self.tool = Tool(size=self.sizer(TOOL_TEXTURE))
        self.monster = Monster()
        self.obstacles: list[Ground] = []
        self.view_center_x = WINDOW_WIDTH / 2

    @property
    def view_left(self) -> float:
        return self.view_center_x - WINDOW_WIDTH / 2

    def start(self) -> None:
        """Leave the menu and enter the next level."""
        self.level += 1
        self.init_scene()

    def init_scene(self) -> None:
        """Build the ground, items, scenery and monsters of the current level."""
        self.obstacles = []
        self.ground.update_map(self.level)
        if self.ground.texture is not None:
            self.ground.tile_size = self.sizer(self.ground.texture)
        self.ground.init_map()
        self.ground.create_map()
        self.tool.create()

        theme = theme_for_level(self.level)
        if theme is not None:
            tile = self.sizer(theme.obstacle_texture)
            self.obstacles.extend(
                Step(theme.obstacle_texture, rng=self.rng, tile_size=tile) for _ in range(4)
            )
            self.obstacles.extend(
                Platform(theme.obstacle_texture, rng=self.rng, tile_size=tile) for _ in range(4)
            )
            self.obstacles.append(Cloud(theme.cloud_texture, self.sizer(theme.cloud_texture)))
            self.obstacles.append(Tree(theme.tree_texture, self.sizer(theme.tree_texture)))
            self.monster = Monster(theme.monster_texture, self.sizer(theme.monster_texture))
            self.monster.create()

        for layer in self.obstacles:
            layer.init_map()
            layer.create_map()

    def tick(self, elapsed: float, controls: Controls | None = None) -> None:
        """Run one fixed-length step of game logic."""
        self.finish.collide(self.role)
        if self.role.finished and self.level != 0 and self.level < LAST_LEVEL:
            self.level += 1
            self.init_scene()
            self.role.finished = False
        self._update(elapsed, controls or Controls())

    def _update(self, elapsed: float, controls: Controls) -> None:
        if not self.level:
            return
        if self.tool.collide(self.role) and self.tools_collected < NUM_TOOLS:
            self.tools_collected += 1
        self.monster.move(elapsed)
        if self.monster.collide(self.role):
            self.view_center_x = WINDOW_WIDTH / 2

        box = self.role.bound_box()
        contact = Contact.NONE
        for layer in self.obstacles:
            contact = Contact(layer.check_collision(box))
            if contact:
                break
        self.role.update(elapsed, self.ground.check_collision(box), contact, controls)

        role_x = self.role.x
        view_left = self.view_left
        view_right = self.view_center_x + WINDOW_WIDTH / 2
        if role_x > view_right - SCROLL_THRESHOLD and view_right < MAP_PIXEL_WIDTH:
            self.view_center_x += role_x - (view_right - SCROLL_THRESHOLD)
        if role_x < view_left + SCROLL_THRESHOLD and view_left > 0:
            self.view_center_x += role_x - (view_left + SCROLL_THRESHOLD)

    def status_text(self) -> str:
        """Return the level and item counter shown during play."""
        return f"Level: {self.level}/{LAST_LEVEL} \t Tool Number: {self.tools_collected}/{NUM_TOOLS}"