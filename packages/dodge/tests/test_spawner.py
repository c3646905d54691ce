"""Tests for the spawn and fall systems."""
from frameloop import Scheduler

from dodge import FallingObject, GameConfig, PlayerState, Session
from dodge.spawner import make_fall_system, make_spawn_system

CONFIG = GameConfig()


def _session() -> Session:
    return Session(player=PlayerState(x=270.0, width=60.0, height=20.0))


class TestSpawnSystem:
    def test_first_tick_spawns(self):
        session = _session()
        scheduler = Scheduler(seed=1)
        spawn = make_spawn_system(CONFIG)
        scheduler.every(lambda ctx: spawn(session, ctx))
        scheduler.step()
        assert len(session.objects) == 1
        obj = session.objects[0]
        assert obj.y == -25.0
        assert obj.size == 25.0
        assert 0.0 <= obj.x <= 575.0
        assert session.last_spawn == scheduler.clock.now()

    def test_spawn_rate_over_ten_seconds(self):
        """Ten seconds of play spawn 10000 / spawn_interval objects, give or take one."""
        session = _session()
        scheduler = Scheduler(fps=60, seed=3)
        spawn = make_spawn_system(CONFIG)
        scheduler.every(lambda ctx: spawn(session, ctx))
        scheduler.run_for(10_000)
        expected = 10_000 // int(CONFIG.spawn_interval)
        assert abs(len(session.objects) - expected) <= 1

    def test_spawn_rate_ignores_frame_rate(self):
        counts = []
        for fps in (30, 60, 144):
            session = _session()
            scheduler = Scheduler(fps=fps, seed=3)
            spawn = make_spawn_system(CONFIG)
            scheduler.every(lambda ctx, s=session: spawn(s, ctx))
            scheduler.run_for(10_000)
            counts.append(len(session.objects))
        assert max(counts) - min(counts) <= 2

    def test_interval_must_be_exceeded(self):
        """A spawn happens only once strictly more than the interval has passed."""
        session = _session()
        scheduler = Scheduler(fps=50, seed=1)
        spawn = make_spawn_system(CONFIG)
        scheduler.every(lambda ctx: spawn(session, ctx))
        scheduler.run(26)  # 20 ms frames: frame 26 is exactly 500 ms after frame 1
        assert len(session.objects) == 1
        scheduler.step()
        assert len(session.objects) == 2

    def test_ids_are_unique_and_increasing(self):
        session = _session()
        scheduler = Scheduler(seed=5)
        spawn = make_spawn_system(CONFIG)
        scheduler.every(lambda ctx: spawn(session, ctx))
        scheduler.run_for(5_000)
        ids = [o.id for o in session.objects]
        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)

    def test_spawn_x_within_field(self):
        session = _session()
        scheduler = Scheduler(seed=11)
        spawn = make_spawn_system(CONFIG)
        scheduler.every(lambda ctx: spawn(session, ctx))
        scheduler.run_for(30_000)
        assert all(0.0 <= o.x <= 575.0 for o in session.objects)

    def test_on_spawn_callback(self):
        session = _session()
        scheduler = Scheduler(seed=1)
        seen = []
        spawn = make_spawn_system(CONFIG, lambda s, ctx, obj: seen.append(obj.id))
        scheduler.every(lambda ctx: spawn(session, ctx))
        scheduler.step()
        assert seen == [1]

    def test_same_seed_same_positions(self):
        xs = []
        for _ in range(2):
            session = _session()
            scheduler = Scheduler(seed=99)
            spawn = make_spawn_system(CONFIG)
            scheduler.every(lambda ctx, s=session: spawn(s, ctx))
            scheduler.run_for(3_000)
            xs.append([o.x for o in session.objects])
        assert xs[0] == xs[1]


class TestFallSystem:
    def test_objects_move_down(self):
        session = _session()
        session.objects = [FallingObject(id=1, x=10.0, y=-25.0, size=25.0)]
        scheduler = Scheduler()
        fall = make_fall_system(CONFIG)
        scheduler.every(lambda ctx: fall(session, ctx))
        scheduler.run(3)
        assert session.objects[0].y == -13.0
        assert session.objects[0].x == 10.0

    def test_object_removed_on_reaching_floor(self):
        session = _session()
        session.objects = [
            FallingObject(id=1, x=0.0, y=795.0, size=25.0),
            FallingObject(id=2, x=0.0, y=790.0, size=25.0),
        ]
        scheduler = Scheduler()
        fall = make_fall_system(CONFIG)
        scheduler.every(lambda ctx: fall(session, ctx))
        scheduler.step()
        assert [o.id for o in session.objects] == [2]
        assert session.objects[0].y == 794.0
        scheduler.step()
        assert session.objects == []

    def test_objects_are_replaced_not_mutated(self):
        session = _session()
        original = FallingObject(id=1, x=0.0, y=0.0, size=25.0)
        session.objects = [original]
        scheduler = Scheduler()
        fall = make_fall_system(CONFIG)
        scheduler.every(lambda ctx: fall(session, ctx))
        scheduler.step()
        assert original.y == 0.0
        assert session.objects[0].y == 4.0
