"""The player character and its movement rules."""

from __future__ import annotations

from dataclasses import dataclass

from evolution.geometry import CELL_SIZE, GRAVITY, MAP_PIXEL_WIDTH, Contact, FloatRect


@dataclass(frozen=True)
class Controls:
    """Which movement keys are held during a frame."""

    left: bool = False
    right: bool = False
    jump: bool = False


class Role:
    """The character the player steers through the level."""

    HORIZONTAL_SPEED = 100.0
    JUMP_SPEED = 3500.0

    def __init__(self, width: float = CELL_SIZE, height: float = CELL_SIZE) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("role size must be positive")
        self.width = float(width)
        self.height = float(height)
        self.x = 0.0
        self.y = 0.0
        self.finished = False

    def bound_box(self) -> FloatRect:
        """Return the rectangle the character occupies."""
        return FloatRect(self.x, self.y, self.width, self.height)

    def set_position(self, x: float, y: float) -> None:
        """Place the character's top-left corner at (x, y)."""
        self.x = float(x)
        self.y = float(y)

    def restart(self) -> None:
        """Send the character back to the start of the level."""
        self.x = 0.0
        self.y = 0.0

    def update(
        self,
        elapsed: float,
        on_ground: bool,
        contact: Contact | int = Contact.NONE,
        controls: Controls | None = None,
    ) -> None:
        """Advance the character by `elapsed` seconds given the held keys and contacts."""
        controls = controls or Controls()
        contact = Contact(contact)
        start_x = self.x
        x, y = self.x, self.y

        if controls.left and not controls.right and not contact & Contact.LEFT:
            x -= self.HORIZONTAL_SPEED * elapsed
        if controls.right and not controls.left and not contact & Contact.RIGHT:
            x += self.HORIZONTAL_SPEED * elapsed

        standing = bool(on_ground) or bool(contact & Contact.BOTTOM)
        if controls.jump and standing:
            y -= self.JUMP_SPEED * elapsed
        elif not standing:
            y += GRAVITY * elapsed

        if x < 0 or y < 0:
            x = 0.0
            y = 0.0
        if start_x + self.width > MAP_PIXEL_WIDTH:
            x = MAP_PIXEL_WIDTH - self.width

        self.x, self.y = x, y