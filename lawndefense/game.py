"""Game state and rules of the lawn defence game, independent of drawing."""

from __future__ import annotations

import math
import random
from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum

WIN_WIDTH = 900
WIN_HEIGHT = 600

ROWS = 3
COLS = 9
LAWN_LEFT = 256
LAWN_TOP = 179
LAWN_RIGHT = 990
LAWN_BOTTOM = 489
CELL_WIDTH = 81
CELL_HEIGHT = 102

CARD_LEFT = 323
CARD_TOP = 6
CARD_BOTTOM = 96
CARD_WIDTH = 65

START_SUNSHINE = 50
SUN_VALUE = 25
SUN_FRAMES = 29
SUN_POOL = 10
SUN_START_Y = 60
SUN_TARGET_X = 260
SUN_TARGET_Y = 0
SUN_FLIGHT_SPEED = 32
SUN_FALL_SPEED = 4
SUN_LIFETIME = 100

ZOMBIE_POOL = 10
ZOMBIE_FRAMES = 18
ZOMBIE_BLOOD = 10
ZOMBIE_LOSE_X = 120
# Horizontal step for each walking frame.
ZOMBIE_SPEEDS = (0, 0, 1, 1, 1, 1, 1, 0, 0, 0, 1, 3, 3, 2, 1, 0, 0, 0)

BULLET_POOL = 30
BULLET_SPEED = 12
BLAST_FRAMES = 4
SHOT_INTERVAL = 30


class PlantKind(IntEnum):
    """Plants that can be put on the lawn, numbered from their card slot."""

    PEASHOOTER = 1
    SUNFLOWER = 2


class GameOver(Exception):
    """A zombie reached the house."""


@dataclass(frozen=True)
class SpriteSizes:
    """Image sizes the rules depend on."""

    sun_width: int
    sun_height: int
    zombie_width: int
    peashooter_width: int


@dataclass
class Plant:
    kind: PlantKind
    frame: int = 0


@dataclass
class SunBall:
    x: int = 0
    y: int = 0
    frame: int = 0
    dest_y: int = 0
    used: bool = False
    timer: int = 0
    xoff: float = 0.0
    yoff: float = 0.0

    @property
    def flying(self) -> bool:
        """True while a collected ball travels to the counter."""
        return not self.used and bool(self.xoff)


@dataclass
class Zombie:
    x: int = 0
    y: int = 0
    frame: int = 0
    row: int = 0
    used: bool = False
    speed: int = 0
    blood: int = 0


@dataclass
class Bullet:
    x: int = 0
    y: int = 0
    row: int = 0
    used: bool = False
    speed: int = 0
    blast: bool = False
    frame: int = 0


def sun_text_x(value: int) -> int:
    """X position of the sunshine counter text."""
    if value == 0:
        return 274
    if value < 100:
        return 268
    if value < 1000:
        return 264
    return 258


def _on_lawn(x: int, y: int) -> bool:
    return LAWN_LEFT < x < LAWN_RIGHT and LAWN_TOP < y < LAWN_BOTTOM


def cell_at(x: int, y: int) -> tuple[int, int] | None:
    """Lawn cell (row, col) under a point, or None."""
    if not _on_lawn(x, y):
        return None
    row, col = (y - LAWN_TOP) // CELL_HEIGHT, (x - LAWN_LEFT) // CELL_WIDTH
    return (row, col) if row < ROWS and col < COLS else None


def cell_origin(row: int, col: int) -> tuple[int, int]:
    """Top-left corner of a lawn cell."""
    return LAWN_LEFT + col * CELL_WIDTH, LAWN_TOP + row * CELL_HEIGHT


def _flight_step(x: float, y: float) -> tuple[float, float]:
    angle = math.atan2(y - SUN_TARGET_Y, x - SUN_TARGET_X)
    return SUN_FLIGHT_SPEED * math.cos(angle), SUN_FLIGHT_SPEED * math.sin(angle)


def _free_slot(pool) -> int | None:
    return next((i for i, item in enumerate(pool) if not item.used), None)


class Game:
    """The whole game state, advanced one logic frame at a time."""

    def __init__(
        self,
        plant_frames: Mapping[PlantKind, int],
        sizes: SpriteSizes,
        rng: random.Random | None = None,
    ) -> None:
        self.plant_frames = {PlantKind(k): n for k, n in plant_frames.items()}
        for kind in PlantKind:
            if self.plant_frames.get(kind, 0) < 1:
                raise ValueError(f"no animation frames for {kind.name}")
        self.sizes = sizes
        self.rng = rng or random.Random()
        self.lawn: list[list[Plant | None]] = [[None] * COLS for _ in range(ROWS)]
        self.balls = [SunBall() for _ in range(SUN_POOL)]
        self.zombies = [Zombie() for _ in range(ZOMBIE_POOL)]
        self.bullets = [Bullet() for _ in range(BULLET_POOL)]
        self.sunshine = START_SUNSHINE
        self.selected: PlantKind | None = None
        self.cursor = (0, 0)
        self._sun_count, self._sun_interval = 0, 50
        self._zombie_count, self._zombie_interval = 0, 10
        self._zombie_anim = 0
        self._shot_count = 0

    def press(self, x: int, y: int) -> int:
        """Left button press; returns how many sun balls were collected."""
        if CARD_LEFT < x < CARD_LEFT + CARD_WIDTH * len(PlantKind) and CARD_TOP < y < CARD_BOTTOM:
            self.selected = PlantKind((x - CARD_LEFT) // CARD_WIDTH + 1)
            self.cursor = (x, y)
        if self.selected is None or not _on_lawn(x, y):
            return self.collect_sunshine(x, y)
        cell = cell_at(x, y)
        if cell is not None and self.lawn[cell[0]][cell[1]] is None:
            self.lawn[cell[0]][cell[1]] = Plant(self.selected)
            self.selected = None
        return 0

    def move(self, x: int, y: int) -> None:
        """Mouse movement drags the selected card."""
        if self.selected is not None:
            self.cursor = (x, y)

    def right_press(self) -> None:
        """Right button drops the selected card."""
        self.selected = None

    def collect_sunshine(self, x: int, y: int) -> int:
        """Pick up falling sun balls under the point; returns how many."""
        collected = 0
        for ball in self.balls:
            if (
                ball.used
                and ball.x < x < ball.x + self.sizes.sun_width
                and ball.y < y < ball.y + self.sizes.sun_height
            ):
                ball.used = False
                ball.xoff, ball.yoff = _flight_step(ball.x, ball.y)
                collected += 1
        return collected

    def create_sunshine(self) -> None:
        self._sun_count += 1
        if self._sun_count < self._sun_interval:
            return
        self._sun_interval = 100 + self.rng.randrange(200)
        self._sun_count = 0
        slot = _free_slot(self.balls)
        if slot is None:
            return
        x = SUN_TARGET_X + self.rng.randrange(WIN_WIDTH - SUN_TARGET_X)
        dest_y = 200 + self.rng.randrange(4) * 90
        self.balls[slot] = SunBall(x=x, y=SUN_START_Y, dest_y=dest_y, used=True)

    def update_sunshine(self) -> None:
        for ball in self.balls:
            if ball.used:
                ball.frame = (ball.frame + 1) % SUN_FRAMES
                if ball.timer == 0:
                    ball.y += SUN_FALL_SPEED
                if ball.y > ball.dest_y:
                    ball.timer += 1
                    if ball.timer > SUN_LIFETIME:
                        ball.used = False
                        ball.timer = 0
            elif ball.xoff:
                ball.xoff, ball.yoff = _flight_step(ball.x, ball.y)
                ball.x = int(ball.x - ball.xoff)
                ball.y = int(ball.y - ball.yoff)
                if ball.y < 0 or ball.x < SUN_TARGET_X + 2:
                    ball.xoff = ball.yoff = 0.0
                    self.sunshine += SUN_VALUE

    def create_zombie(self) -> None:
        self._zombie_count += 1
        if self._zombie_count <= self._zombie_interval:
            return
        self._zombie_count = 0
        self._zombie_interval = self.rng.randrange(50) + 300
        slot = _free_slot(self.zombies)
        if slot is None:
            return
        row = self.rng.randrange(ROWS)
        self.zombies[slot] = Zombie(
            x=WIN_WIDTH, y=172 + (1 + row) * 100, row=row, used=True, speed=4, blood=ZOMBIE_BLOOD
        )

    def update_zombies(self) -> None:
        """Move zombies and advance their animation; raises GameOver."""
        active = [z for z in self.zombies if z.used]
        for zombie in active:
            zombie.speed = ZOMBIE_SPEEDS[zombie.frame]
            zombie.x -= zombie.speed
            if zombie.x < ZOMBIE_LOSE_X:
                raise GameOver("over")
        self._zombie_anim += 1
        if self._zombie_anim > 2:
            self._zombie_anim = 0
            for zombie in active:
                zombie.frame = (zombie.frame + 1) % ZOMBIE_FRAMES

    def shoot(self) -> None:
        danger_x = WIN_WIDTH - self.sizes.zombie_width + 50
        threatened = {z.row for z in self.zombies if z.used and z.x < danger_x}
        for row in sorted(threatened):
            for col, plant in enumerate(self.lawn[row]):
                if plant is None or plant.kind is not PlantKind.PEASHOOTER:
                    continue
                self._shot_count += 1
                if self._shot_count <= SHOT_INTERVAL:
                    continue
                self._shot_count = 0
                slot = _free_slot(self.bullets)
                if slot is not None:
                    plant_x, plant_y = cell_origin(row, col)
                    self.bullets[slot] = Bullet(
                        x=plant_x + self.sizes.peashooter_width - 28,
                        y=plant_y + 19,
                        row=row,
                        used=True,
                        speed=BULLET_SPEED,
                    )

    def update_bullets(self) -> None:
        for bullet in self.bullets:
            if not bullet.used:
                continue
            bullet.x += bullet.speed
            if bullet.x > WIN_WIDTH:
                bullet.used = False
            if bullet.blast:
                bullet.frame += 1
                if bullet.frame >= BLAST_FRAMES:
                    bullet.used = False

    def check_collisions(self) -> None:
        for bullet in self.bullets:
            if not bullet.used or bullet.blast:
                continue
            for zombie in self.zombies:
                if zombie.used and bullet.row == zombie.row and zombie.x + 80 < bullet.x < zombie.x + 110:
                    zombie.blood -= 1
                    bullet.blast = True
                    bullet.speed = 0

    def animate_plants(self) -> None:
        for cells in self.lawn:
            for plant in filter(None, cells):
                plant.frame += 1
                if plant.frame >= self.plant_frames[plant.kind]:
                    plant.frame = 0

    def tick(self) -> None:
        """Advance the game by one logic frame."""
        self.animate_plants()
        self.create_sunshine()
        self.update_sunshine()
        self.create_zombie()
        self.update_zombies()
        self.shoot()
        self.update_bullets()
        self.check_collisions()