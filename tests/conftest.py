import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from orbit_viewer.core.model import SimulationState
from orbit_viewer.data.bodies import lookup


@pytest.fixture(scope="session", autouse=True)
def pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def earth():
    return lookup("earth")


@pytest.fixture
def moon():
    return lookup("moon")


@pytest.fixture
def state(earth):
    return SimulationState(earth)


@pytest.fixture
def canvas():
    return pygame.Surface((800, 800))


@pytest.fixture
def notice_font():
    return pygame.font.Font(None, 24)
