import os
import random

# headless pygame for surfaces and fonts
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


@pytest.fixture(scope="session", autouse=True)
def pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def rng():
    return random.Random(1234)

