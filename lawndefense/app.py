"""Window, asset loading and main loop of the lawn defence game."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

import pygame

from lawndefense.game import (
    CARD_LEFT,
    CARD_TOP,
    CARD_WIDTH,
    SUN_FRAMES,
    WIN_HEIGHT,
    WIN_WIDTH,
    ZOMBIE_FRAMES,
    Game,
    GameOver,
    PlantKind,
    SpriteSizes,
    cell_origin,
    sun_text_x,
)
from lawndefense.tools import DelayTimer

MAX_PLANT_FRAMES = 20
LOGIC_INTERVAL_MS = 72
MENU_X, MENU_Y, MENU_WIDTH, MENU_HEIGHT = 474, 75, 300, 140
BLACK = (0, 0, 0)


@dataclass
class Assets:
    """Every image the game draws, plus the sound played on collection."""

    background: pygame.Surface
    bar: pygame.Surface
    cards: list[pygame.Surface]
    plants: dict[PlantKind, list[pygame.Surface]]
    sun: list[pygame.Surface]
    zombies: list[pygame.Surface]
    bullet: pygame.Surface
    blast: list[pygame.Surface]
    menu_background: pygame.Surface
    menu_idle: pygame.Surface
    menu_pressed: pygame.Surface
    sun_sound: Path


def _load(path: Path) -> pygame.Surface:
    if not path.is_file():
        raise FileNotFoundError(f"missing image: {path}")
    return pygame.image.load(str(path))


def _plant_dir(root: Path, kind: PlantKind) -> Path:
    return root / "zhiwu" / str(int(kind) - 1)


def count_frames(root: Path | str, kind: PlantKind) -> int:
    """Number of consecutive animation frames present for a plant kind."""
    folder = _plant_dir(Path(root), kind)
    count = 0
    while count < MAX_PLANT_FRAMES and (folder / f"{count + 1}.png").is_file():
        count += 1
    return count


def load_assets(root: Path | str) -> Assets:
    """Load every image from the resource directory."""
    root = Path(root)
    full_blast = _load(root / "bullets" / "bullet_blast.png")
    width, height = full_blast.get_size()
    blast = [
        pygame.transform.smoothscale(full_blast, (int(width * k * 0.2), int(height * k * 0.2)))
        for k in (1, 2, 3)
    ] + [full_blast]
    return Assets(
        background=_load(root / "bg.jpg"),
        bar=_load(root / "bar5.png"),
        cards=[_load(root / "Cards" / f"card_{int(kind)}.png") for kind in PlantKind],
        plants={
            kind: [_load(_plant_dir(root, kind) / f"{j + 1}.png") for j in range(count_frames(root, kind))]
            for kind in PlantKind
        },
        sun=[_load(root / "sunshine" / f"{i + 1}.png") for i in range(SUN_FRAMES)],
        zombies=[_load(root / "zm" / f"{i + 1}.png") for i in range(ZOMBIE_FRAMES)],
        bullet=_load(root / "bullets" / "bullet_normal.png"),
        blast=blast,
        menu_background=_load(root / "menu.png"),
        menu_idle=_load(root / "menu2.png"),
        menu_pressed=_load(root / "menu1.png"),
        sun_sound=root / "sunshine.mp3",
    )


def menu_button_hit(x: int, y: int) -> bool:
    """True when a press at (x, y) lands on the start button."""
    return MENU_X < x < MENU_X + MENU_WIDTH and MENU_Y < y < MENU_Y + MENU_HEIGHT


class App:
    """The game window: draws the state and feeds it input and time."""

    def __init__(self, root: Path | str) -> None:
        self.assets = load_assets(root)
        if not self.assets.plants[PlantKind.PEASHOOTER]:
            raise ValueError("no animation frames for PEASHOOTER")
        sizes = SpriteSizes(
            sun_width=self.assets.sun[0].get_width(),
            sun_height=self.assets.sun[0].get_height(),
            zombie_width=self.assets.zombies[0].get_width(),
            peashooter_width=self.assets.plants[PlantKind.PEASHOOTER][0].get_width(),
        )
        self.game = Game({k: len(f) for k, f in self.assets.plants.items()}, sizes)
        pygame.init()
        self.screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        self.font = pygame.font.SysFont("segoeuiblack", 30)
        self.timer = DelayTimer()
        self._clock = pygame.time.Clock()
        self._sound = None
        try:
            if self.assets.sun_sound.is_file():
                pygame.mixer.init()
                self._sound = pygame.mixer.Sound(str(self.assets.sun_sound))
        except pygame.error:
            self._sound = None

    def draw(self) -> None:
        """Render the current game state and show it."""
        screen, assets, game = self.screen, self.assets, self.game
        screen.blit(assets.background, (0, 0))
        screen.blit(assets.bar, (235, 0))
        for i, card in enumerate(assets.cards):
            screen.blit(card, (CARD_LEFT + i * CARD_WIDTH, CARD_TOP))
        for row, cells in enumerate(game.lawn):
            for col, plant in enumerate(cells):
                if plant is not None:
                    x, y = cell_origin(row, col)
                    screen.blit(assets.plants[plant.kind][plant.frame], (x, y + 13))
        if game.selected is not None:
            img = assets.plants[game.selected][0]
            cx, cy = game.cursor
            screen.blit(img, (cx - img.get_width() // 2, cy - img.get_height() // 2))
        for ball in game.balls:
            if ball.used or ball.xoff:
                screen.blit(assets.sun[ball.frame], (ball.x, ball.y))
        text = self.font.render(str(game.sunshine), True, BLACK)
        screen.blit(text, (sun_text_x(game.sunshine), 67))
        for zombie in (z for z in game.zombies if z.used):
            img = assets.zombies[zombie.frame]
            screen.blit(img, (zombie.x, zombie.y - img.get_height()))
        for bullet in (b for b in game.bullets if b.used):
            img = assets.blast[bullet.frame] if bullet.blast else assets.bullet
            screen.blit(img, (bullet.x, bullet.y))
        pygame.display.flip()

    def run_menu(self) -> bool:
        """Show the start menu; True once start is clicked, False if the window closes."""
        pressed = False
        while True:
            self.screen.blit(self.assets.menu_background, (0, 0))
            button = self.assets.menu_pressed if pressed else self.assets.menu_idle
            self.screen.blit(button, (MENU_X, MENU_Y))
            pygame.display.flip()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and menu_button_hit(*event.pos):
                    pressed = True
                elif pressed and event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    x, y = event.pos
                    if MENU_X <= x <= MENU_X + MENU_WIDTH and MENU_Y <= y <= MENU_Y + MENU_HEIGHT:
                        return True
                    pressed = False
            self._clock.tick(60)

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.game.press(*event.pos) and self._sound is not None:
                    self._sound.play()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
                self.game.right_press()
            elif event.type == pygame.MOUSEMOTION:
                self.game.move(*event.pos)
        return True

    def run(self) -> None:
        """Play until the window closes or a zombie reaches the house."""
        elapsed, due = 0, True
        while self._handle_events():
            elapsed += self.timer.delay()
            if elapsed > LOGIC_INTERVAL_MS:
                due, elapsed = True, 0
            self.draw()
            if due:
                due = False
                try:
                    self.game.tick()
                except GameOver:
                    print("over")
                    return
            self._clock.tick(240)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="lawndefense", description="Defend the lawn.")
    parser.add_argument("--resources", default="res", help="directory holding the game images")
    args = parser.parse_args(argv)
    try:
        app = App(args.resources)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))
    try:
        if app.run_menu():
            app.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())