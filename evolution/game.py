"""Window, input handling and drawing for the game."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

import pygame

from evolution.geometry import WINDOW_HEIGHT, WINDOW_WIDTH, FloatRect
from evolution.role import Controls
from evolution.world import ROLE_TEXTURE, World

TIME_PER_FRAME = 1.0 / 60.0
MENU_TEXTURE = "resources/menu.png"
FONT_FILE = "resources/font.ttf"
TITLE = "Evolution"
BACKGROUND = (0, 255, 255)


class Game:
    """The game window with its menu and level rendering."""

    def __init__(self, root: str | Path = ".", rng: random.Random | None = None) -> None:
        self.root = Path(root)
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        self._textures: dict[str, pygame.Surface] = {}
        self.menu_image = self._texture(MENU_TEXTURE)
        self.font = self._font(20)
        self.title_font = self._font(80)
        self.button_font = self._font(18)
        self.world = World(rng=rng, sizer=self._size)

        self.menu_rect = pygame.Rect(0, 0, 200, 100)
        self.menu_rect.center = (WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2)
        self.start_button = pygame.Rect(self.menu_rect.left + 10, self.menu_rect.top + 30, 80, 24)
        self.end_button = pygame.Rect(self.menu_rect.left + 10, self.menu_rect.top + 62, 80, 24)
        self.running = True

    def _texture(self, name: str) -> pygame.Surface:
        surface = self._textures.get(name)
        if surface is None:
            path = self.root / name
            if not path.is_file():
                raise FileNotFoundError(f"missing texture: {path}")
            surface = pygame.image.load(str(path)).convert_alpha()
            self._textures[name] = surface
        return surface

    def _size(self, name: str) -> tuple[float, float]:
        width, height = self._texture(name).get_size()
        return float(width), float(height)

    def _font(self, size: int) -> pygame.font.Font:
        path = self.root / FONT_FILE
        return pygame.font.Font(str(path) if path.is_file() else None, size)

    def handle_menu_click(self, pos: tuple[int, int]) -> bool:
        """React to a click on the menu; tell whether a button was hit."""
        if self.world.level != 0:
            return False
        if self.start_button.collidepoint(pos):
            self.world.start()
            return True
        if self.end_button.collidepoint(pos):
            self.running = False
            return True
        return False

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        clock = pygame.time.Clock()
        pending = 0.0
        while self.running:
            pending += clock.tick(60) / 1000.0
            while pending > TIME_PER_FRAME and self.running:
                pending -= TIME_PER_FRAME
                self._process_events()
                self.world.tick(TIME_PER_FRAME, self._controls())
            if self.running:
                self._render()
        pygame.display.quit()

    def _process_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_menu_click(event.pos)

    @staticmethod
    def _controls() -> Controls:
        keys = pygame.key.get_pressed()
        return Controls(left=bool(keys[pygame.K_a]), right=bool(keys[pygame.K_d]), jump=bool(keys[pygame.K_w]))

    def _blit_tiles(self, texture: str | None, tiles: list[FloatRect], offset: float) -> None:
        if texture is None:
            return
        image = self._texture(texture)
        for tile in tiles:
            self.screen.blit(image, (tile.left - offset, tile.top))

    def _render(self) -> None:
        self.screen.fill(BACKGROUND)
        if self.world.level:
            self._render_level()
        else:
            self._render_menu()
        pygame.display.flip()

    def _render_level(self) -> None:
        world = self.world
        offset = world.view_left
        self._blit_tiles(world.ground.texture, world.ground.tiles, offset)
        for layer in world.obstacles:
            self._blit_tiles(layer.texture, layer.tiles, offset)
        self._blit_tiles(world.tool.texture, world.tool.tiles, offset)
        self._blit_tiles(world.monster.texture, world.monster.tiles, offset)
        self._blit_tiles(world.finish.texture, [world.finish.bounds], offset)
        self._blit_tiles(ROLE_TEXTURE, [world.role.bound_box()], offset)
        text = self.font.render(world.status_text().replace("\t", "    "), True, (0, 0, 0))
        self.screen.blit(text, (100, 10))

    def _render_menu(self) -> None:
        self.screen.blit(self.menu_image, (0, 0))
        outline = self.title_font.render(TITLE, True, (0, 0, 0))
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            self.screen.blit(outline, (100 + dx, 40 + dy))
        self.screen.blit(self.title_font.render(TITLE, True, (255, 255, 0)), (100, 40))

        pygame.draw.rect(self.screen, (40, 40, 60), self.menu_rect)
        self.screen.blit(self.button_font.render("Menu", True, (255, 255, 255)), (self.menu_rect.left + 8, self.menu_rect.top + 6))
        for rect, label in ((self.start_button, "Start"), (self.end_button, "End")):
            pygame.draw.rect(self.screen, (70, 100, 160), rect)
            self.screen.blit(self.button_font.render(label, True, (255, 255, 255)), (rect.left + 6, rect.top + 3))


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="evolution", description="A side-scrolling platform game.")
    parser.add_argument("--root", default=".", help="directory that holds the resources folder")
    args = parser.parse_args(argv)
    Game(args.root).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())