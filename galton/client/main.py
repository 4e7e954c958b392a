# galton/client/main.py
import argparse
import logging
import os
import sys
import pygame

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from galton.shared.board_config import CFG
from galton.shared.constants import APP_TITLE, WIDTH, HEIGHT, FPS, BLACK, WHITE
from galton.shared.settings import Settings, load_settings
from galton.client.screens import BoardScreen

log = logging.getLogger(__name__)


class App:
    def __init__(self, settings: Settings):
        pygame.init()
        pygame.display.set_caption(APP_TITLE)
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 22)
        self.settings = settings

        self.screens = {
            "board": BoardScreen(self),
        }

        self.current = None
        self.running = True
        self.change_screen("board")

    def change_screen(self, name, **kwargs):
        if self.current:
            self.current.on_exit()
        self.current = self.screens[name]
        self.current.on_enter(**kwargs)

    def handle_global_keys(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False

    def draw_footer(self):
        text = "ESC: Quit | SPACE: Start | R: Reset"
        w, h = self.screen.get_size()
        img = self.font.render(text, True, WHITE)
        rect = img.get_rect(midbottom=(w // 2, h - 8))
        shadow = self.font.render(text, True, BLACK)
        self.screen.blit(shadow, (rect.x + 1, rect.y + 1))
        self.screen.blit(img, rect)

    def run(self):
        try:
            while self.running:
                dt = self.clock.tick(FPS) / 1000.0

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    self.handle_global_keys(event)
                    self.current.handle_event(event)

                self.current.update(dt)

                self.current.draw(self.screen)
                self.draw_footer()
                pygame.display.flip()

        finally:
            if self.current:
                self.current.on_exit()
            pygame.quit()


def parse_args(argv=None, defaults: Settings = None):
    defaults = defaults or load_settings()
    parser = argparse.ArgumentParser(description="Interactive Galton board simulation")
    parser.add_argument("--rows", type=int, default=defaults.rows, help="initial number of peg rows")
    parser.add_argument("--balls", type=int, default=defaults.balls, help="initial number of balls")
    parser.add_argument("--capacity", type=int, default=defaults.capacity, help="initial bin capacity")
    parser.add_argument("--log-level", default=defaults.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper)
    args = parser.parse_args(argv)
    return Settings(rows=args.rows, balls=args.balls, capacity=args.capacity, log_level=args.log_level)


def main(argv=None):
    settings = parse_args(argv)
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO), format=CFG.log_format)
    try:
        App(settings).run()
    except Exception as e:
        log.exception("Fatal error: %s", e)
        raise


if __name__ == "__main__":
    main()
