"""Pytest configuration and shared fixtures."""

import os
import random

# headless pygame; must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pygame
import pytest

from space_circles.core import GameSimulation, SimulationConfig
from space_circles.storage import MemoryStore


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.display.init()
    pygame.font.init()
    yield
    pygame.quit()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def make_sim(store):
    """Factory for simulations with a seeded RNG and an 800x600 playfield."""

    def _make(seed=1, screen_size=(800, 600), store=store, **options):
        cfg = SimulationConfig(**options)
        return GameSimulation(store, screen_size, cfg, rng=random.Random(seed))

    return _make


@pytest.fixture
def sim(make_sim):
    return make_sim()
