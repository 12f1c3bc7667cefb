"""Game rules: spawning, clicks, scoring, lives and highscores."""

import logging
import random

from space_circles.core import Circle, GameSimulation, Phase, circle_size, time_to_next_circle
from space_circles.storage import MemoryStore


def inject(sim, n, size=100.0, clicked=False, x=400.0, y=300.0):
    circles = [Circle(x=x, y=y, size=size, color=(1, 2, 3), clicked=clicked) for _ in range(n)]
    sim._circles.extend(circles)
    return circles


class TestFormulas:
    def test_spawn_interval(self):
        assert time_to_next_circle(0) == 2000
        assert time_to_next_circle(2) == 1789
        assert time_to_next_circle(18) == 1300

    def test_spawn_interval_is_floored(self):
        assert time_to_next_circle(10 ** 6) == 200
        assert time_to_next_circle(10 ** 6, floor_ms=500) == 500

    def test_circle_size(self):
        assert circle_size(0) == 250
        assert circle_size(9) == 200
        assert circle_size(99) == 150

    def test_circle_size_is_floored(self):
        assert circle_size(10 ** 9) == 20

    def test_contains_uses_radius(self):
        c = Circle(x=100, y=100, size=50, color=(0, 0, 0))
        assert c.contains(100, 100)
        assert c.contains(124, 100)
        assert not c.contains(125, 100)


class TestInitialize:
    def test_initial_state(self, sim):
        assert sim.phase == Phase.Playing
        assert sim.score == 0
        assert sim.lives == 10
        assert sim.next_extra_life_at == 10
        assert sim.elapsed_ms == 0
        assert sim.next_spawn_at_ms == 1000
        assert sim.circles == ()
        assert sim.highscore == 0
        assert not sim.new_highscore

    def test_loads_highscore(self, make_sim):
        sim = make_sim(store=MemoryStore({"highscore": 42}))
        assert sim.highscore == 42

    def test_malformed_highscore_is_zero(self, make_sim):
        store = MemoryStore()
        store.values["highscore"] = "lots"
        assert make_sim(store=store).highscore == 0


class TestTick:
    def test_first_circle_after_one_second(self, sim):
        sim.tick(999)
        assert sim.circles == ()
        sim.tick(1)
        assert len(sim.circles) == 1
        # spawned at 250, shrunk once in the same tick
        assert sim.circles[0].size == 249
        assert sim.next_spawn_at_ms == 3000

    def test_spawn_position_within_margins(self):
        for seed in range(30):
            s = GameSimulation(MemoryStore(), (800, 600), rng=random.Random(seed))
            s.tick(1000)
            c = s.circles[0]
            half = 250 / 2 + 10
            assert half <= c.x <= 800 - half
            assert half <= c.y <= 600 - half
            assert c.color in s.cfg.palette
            assert not c.clicked

    def test_spawn_on_tiny_screen_is_centered(self, make_sim):
        sim = make_sim(screen_size=(100, 80))
        sim.tick(1000)
        c = sim.circles[0]
        assert (c.x, c.y) == (50, 40)

    def test_resize_changes_spawn_area(self, sim):
        sim.resize(300, 300)
        sim.tick(1000)
        c = sim.circles[0]
        assert 135 <= c.x <= 165
        assert 135 <= c.y <= 165

    def test_clicked_circle_scores(self, sim):
        sim.tick(1000)
        c = sim.circles[0]
        assert sim.register_click(c.x, c.y) == 1
        assert c.clicked
        assert sim.score == 0  # scored on the next tick
        sim.tick(20)
        assert sim.circles == ()
        assert sim.score == 1
        assert sim.lives == 10

    def test_unclicked_circle_expires_and_costs_a_life(self, sim):
        sim.tick(1000)
        first = sim.circles[0]
        ticks = 0
        while any(c is first for c in sim.circles):
            sim.tick(20)
            ticks += 1
        # 249 -> 5 takes 244 shrinks
        assert ticks == 244
        assert first.size == 5
        assert sim.lives == 9
        assert sim.score == 0

    def test_simultaneous_expirations_cost_one_life_each(self, sim):
        inject(sim, 3, size=6)
        inject(sim, 1, size=7)
        sim.tick(1)
        assert sim.lives == 7
        assert len(sim.circles) == 1

    def test_lives_never_negative(self, sim):
        sim.lives = 2
        inject(sim, 3, size=6)
        sim.tick(1)
        assert sim.lives == 0
        assert sim.phase == Phase.GameOver

    def test_life_accounting_over_a_whole_game(self, make_sim):
        sim = make_sim(seed=5)
        for _ in range(20000):
            if sim.is_game_over:
                break
            before = sim.lives
            expiring = sum(1 for c in sim.circles if c.size - 1 <= 5)
            sim.tick(20)
            assert sim.lives == max(0, before - expiring)
        assert sim.is_game_over
        assert sim.lives == 0

    def test_hidden_simulation_does_not_advance(self, sim):
        sim.set_visible(False)
        sim.tick(5000)
        assert sim.elapsed_ms == 0
        assert sim.circles == ()
        sim.set_visible(True)
        sim.tick(1000)
        assert len(sim.circles) == 1

    def test_spawns_speed_up_with_score(self, sim):
        sim.score = 18
        sim.tick(1000)
        assert sim.next_spawn_at_ms == 1000 + 1300
        assert sim.circles[0].size == circle_size(18) - 1


class TestExtraLife:
    def test_extra_life_once_per_threshold(self, sim):
        inject(sim, 10, clicked=True)
        sim.tick(1)
        assert sim.score == 10
        assert sim.lives == 11
        assert sim.next_extra_life_at == 20

        sim.tick(1)
        assert sim.lives == 11

        inject(sim, 9, clicked=True)
        sim.tick(1)
        assert sim.score == 19
        assert sim.lives == 11
        assert sim.next_extra_life_at == 20

        inject(sim, 1, clicked=True)
        sim.tick(1)
        assert sim.score == 20
        assert sim.lives == 12
        assert sim.next_extra_life_at == 30

    def test_big_jump_catches_up_one_life_per_tick(self, sim):
        inject(sim, 25, clicked=True)
        sim.tick(1)
        assert (sim.lives, sim.next_extra_life_at) == (11, 20)
        sim.tick(1)
        assert (sim.lives, sim.next_extra_life_at) == (12, 30)
        sim.tick(1)
        assert (sim.lives, sim.next_extra_life_at) == (12, 30)


class TestClicks:
    def test_miss_costs_one_life(self, sim):
        sim.tick(1000)
        assert sim.register_click(0, 0) == 0
        assert sim.lives == 9
        assert not sim.circles[0].clicked

    def test_miss_on_empty_field(self, sim):
        sim.register_click(10, 10)
        assert sim.lives == 9

    def test_overlapping_circles_are_all_hit(self, sim):
        inject(sim, 2)
        assert sim.register_click(400, 300) == 2
        sim.tick(1)
        assert sim.score == 2

    def test_clicking_a_marked_circle_again_is_not_a_miss(self, sim):
        inject(sim, 1)
        sim.register_click(400, 300)
        sim.register_click(400, 300)
        assert sim.lives == 10
        sim.tick(1)
        assert sim.score == 1

    def test_last_life_lost_to_a_miss_ends_the_game(self, sim):
        sim.lives = 1
        sim.register_click(5, 5)
        assert sim.lives == 0
        assert sim.is_game_over

    def test_score_never_decreases(self, make_sim):
        sim = make_sim(seed=3)
        rng = random.Random(11)
        last = 0
        for _ in range(5000):
            if sim.is_game_over:
                break
            if sim.circles and rng.random() < 0.05:
                c = rng.choice(sim.circles)
                sim.register_click(c.x, c.y)
            elif rng.random() < 0.002:
                sim.register_click(rng.uniform(0, 800), rng.uniform(0, 600))
            else:
                sim.tick(20)
            assert sim.score >= last
            assert sim.lives >= 0
            last = sim.score


class TestGameOver:
    def end_game(self, sim, scored=0):
        sim.lives = 1
        inject(sim, scored, clicked=True)
        inject(sim, 1, size=6, x=50, y=50)
        sim.tick(1)
        assert sim.is_game_over

    def test_frozen_until_restart(self, sim):
        sim.tick(1000)
        self.end_game(sim)
        snapshot = (sim.score, sim.lives, sim.circles, sim.elapsed_ms)
        for _ in range(200):
            sim.tick(20)
        assert (sim.score, sim.lives, sim.circles, sim.elapsed_ms) == snapshot

    def test_click_restarts(self, sim):
        sim.tick(1000)
        self.end_game(sim, scored=4)
        assert sim.register_click(0, 0) == 0
        assert sim.phase == Phase.Playing
        assert sim.score == 0
        assert sim.lives == 10
        assert sim.circles == ()
        assert sim.next_extra_life_at == 10
        assert not sim.new_highscore
        assert sim.highscore == 4

    def test_new_highscore_is_saved(self, make_sim):
        store = MemoryStore({"highscore": 3})
        sim = make_sim(store=store)
        self.end_game(sim, scored=5)
        assert sim.new_highscore
        assert sim.highscore == 5
        assert store.load("highscore") == 5
        assert store.values["highscore"] == "5"

    def test_old_highscore_is_kept(self, make_sim):
        saves = []

        class RecordingStore(MemoryStore):
            def save(self, key, value):
                saves.append((key, value))
                super().save(key, value)

        sim = make_sim(store=RecordingStore({"highscore": 50}))
        saves.clear()
        self.end_game(sim, scored=7)
        assert not sim.new_highscore
        assert sim.highscore == 50
        assert saves == []

    def test_save_failure_does_not_raise(self, make_sim, caplog):
        class ReadOnlyStore(MemoryStore):
            def save(self, key, value):
                raise OSError("read-only file system")

        sim = make_sim(store=ReadOnlyStore())
        with caplog.at_level(logging.ERROR, logger="space_circles"):
            self.end_game(sim, scored=2)
        assert sim.is_game_over
        assert "could not save highscore" in caplog.text
