import math
import random

import pytest

from holetap.core import (
    FeedbackKind, GameSession, HoleType, MemoryBestScore, RandomSource, RoundConfig, RoundState,
)

from conftest import ScriptedRandom


def force(session, index, hole_type, lifetime=600, cooldown=300):
    session.holes[index].activate(session.now, hole_type, lifetime_ms=lifetime, cooldown_ms=cooldown)
    return session.layout.hit_center(session.holes[index])


class TestStart:
    def test_start_emits_and_resets(self, session):
        session.tick(5000)
        force(session, 0, HoleType.PRIMARY)
        session.scoreboard.add_score(30)

        events = session.start()
        assert [e.kind for e in events] == [FeedbackKind.START]
        assert session.state is RoundState.Running
        assert session.now == 0
        assert session.score == 0
        assert session.multiplier == 1
        assert session.clock.remaining_ms == session.cfg.duration_ms
        assert not any(h.active for h in session.holes)
        assert len(session.particles) == 0

    def test_new_session_is_idle_and_loads_best(self):
        s = GameSession(store=MemoryBestScore(best=77))
        assert s.state is RoundState.Idle
        assert s.best == 77


class TestHits:
    def test_primary_hit(self, session):
        session.tick(100)
        x, y = force(session, 0, HoleType.PRIMARY)

        events = session.tap(x, y)

        assert [e.kind for e in events] == [FeedbackKind.HIT]
        assert events[0].points == 30
        assert events[0].hole == 0
        assert session.score == 30
        hole = session.holes[0]
        assert not hole.active
        assert hole.recently_hit_until == session.now + 160
        assert hole.cooldown_until >= session.now
        assert len(session.particles) == 10

    def test_bonus_hit_sets_multiplier(self, session):
        session.tick(100)
        x, y = force(session, 6, HoleType.BONUS)

        events = session.tap(x, y)

        assert [e.kind for e in events] == [FeedbackKind.BONUS]
        assert session.multiplier == 2
        assert session.scoreboard.multiplier_expires_at == session.now + 8000
        assert session.score == 0
        assert not session.holes[6].active
        assert len(session.particles) == 16

    def test_primary_under_multiplier_doubles(self, session):
        x, y = force(session, 1, HoleType.BONUS)
        session.tap(x, y)
        session.tick(16)
        x, y = force(session, 2, HoleType.PRIMARY)
        session.tap(x, y)
        assert session.score == 60

    def test_bonus_retrigger_resets_window(self, session):
        x, y = force(session, 1, HoleType.BONUS)
        session.tap(x, y)
        session.tick(3000)
        x, y = force(session, 3, HoleType.BONUS)
        session.tap(x, y)
        assert session.multiplier == 2
        assert session.scoreboard.multiplier_expires_at == pytest.approx(3000 + 8000)

    def test_multiplier_reverts_after_window(self, session):
        x, y = force(session, 1, HoleType.BONUS)
        session.tap(x, y)
        session.tick(8000)
        assert session.multiplier == 2
        session.tick(1)
        assert session.multiplier == 1

    def test_miss_changes_nothing(self, session):
        session.tick(200)
        force(session, 0, HoleType.PRIMARY)
        force(session, 5, HoleType.BONUS)
        before = session.snapshot()

        events = session.tap(5, 5)

        assert [e.kind for e in events] == [FeedbackKind.MISS]
        after = session.snapshot()
        assert after.score == before.score
        assert after.multiplier == before.multiplier
        assert after.holes == before.holes

    def test_tap_on_idle_hole_is_miss(self, session):
        x, y = session.layout.hit_center(session.holes[3])
        assert [e.kind for e in session.tap(x, y)] == [FeedbackKind.MISS]
        assert session.score == 0

    def test_tap_ignored_when_not_running(self, store):
        s = GameSession(rng=ScriptedRandom(), store=store)
        x, y = s.layout.hit_center(s.holes[0])
        s.holes[0].activate(0, HoleType.PRIMARY, 600, 300)
        assert s.tap(x, y) == []
        assert s.score == 0
        assert s.holes[0].active

    def test_one_hole_per_tap(self, scripted, store):
        s = GameSession(rng=scripted, store=store, grid=((0.5, 0.5), (0.5, 0.5)))
        s.start()
        x, y = force(s, 0, HoleType.PRIMARY)
        force(s, 1, HoleType.PRIMARY)
        s.tap(x, y)
        assert s.score == 30
        assert not s.holes[0].active
        assert s.holes[1].active


class TestTicks:
    def test_natural_expiry(self, session):
        force(session, 2, HoleType.PRIMARY, lifetime=500, cooldown=250)
        session.tick(500)
        assert session.holes[2].active
        session.tick(1)
        hole = session.holes[2]
        assert not hole.active
        assert hole.cooldown_until == pytest.approx(501 + 250)
        assert not hole.recently_hit(session.now)

    def test_expired_hole_cannot_be_hit(self, session):
        x, y = force(session, 2, HoleType.PRIMARY, lifetime=100)
        session.tick(200)
        assert [e.kind for e in session.tap(x, y)] == [FeedbackKind.MISS]

    def test_bad_deltas_do_not_move_time(self, session):
        session.tick(100)
        session.tick(-500)
        session.tick(float("nan"))
        assert session.now == 100
        assert session.clock.remaining_ms == session.cfg.duration_ms - 100

    def test_scheduler_runs_each_tick(self, session, scripted):
        scripted.push(0.0, 0.5, 0.5, 0.5)
        session.tick(16)
        assert session.holes[0].type is HoleType.PRIMARY
        assert session.holes[0].popped_at == 16

    def test_no_respawn_in_the_tick_a_hole_clears(self):
        s = GameSession(cfg=RoundConfig(base_spawn_rate=1.0), rng=RandomSource(99))
        s.start()
        for _ in range(1500):
            was_active = [h.active for h in s.holes]
            s.tick(16)
            for before, hole in zip(was_active, s.holes):
                if before and not hole.active:
                    assert hole.cooldown_until > s.now
                if hole.active:
                    assert hole.cooldown_until <= hole.popped_at
            if not s.running:
                break


class TestRoundEnd:
    def test_round_ends_once_and_persists_new_best(self, scripted):
        store = MemoryBestScore(best=10)
        s = GameSession(rng=scripted, store=store)
        s.start()
        x, y = force(s, 0, HoleType.PRIMARY)
        s.tap(x, y)

        events = s.tick(30_000)
        assert [e.kind for e in events] == [FeedbackKind.END]
        end = events[0]
        assert (end.score, end.best, end.new_best) == (30, 30, True)
        assert s.state is RoundState.Ended
        assert store.best == 30
        assert store.saves == 1

        assert s.tick(1000) == []
        assert store.saves == 1

    def test_lower_score_does_not_overwrite_best(self, scripted):
        store = MemoryBestScore(best=100)
        s = GameSession(rng=scripted, store=store)
        s.start()
        x, y = force(s, 0, HoleType.PRIMARY)
        s.tap(x, y)
        events = s.tick(40_000)
        assert events[0].new_best is False
        assert events[0].best == 100
        assert store.saves == 0

    def test_equal_score_is_not_a_new_best(self, scripted):
        store = MemoryBestScore(best=0)
        s = GameSession(rng=scripted, store=store)
        s.start()
        s.tick(30_000)
        assert store.saves == 0

    def test_no_gameplay_after_end(self, session, scripted):
        x, y = force(session, 0, HoleType.PRIMARY, lifetime=60_000)
        session.tick(30_000)
        scripted.push(*([0.0] * 50))
        session.tick(100)
        assert session.tap(x, y) == []
        # the hole is frozen as it was at the end and nothing new spawned
        assert session.holes[0].active
        assert not any(h.active for h in session.holes[1:])

    def test_end_exactly_once_with_random_frames(self):
        s = GameSession(cfg=RoundConfig(duration_ms=2000), rng=RandomSource(5))
        s.start()
        rnd = random.Random(1)
        ends = 0
        last = s.clock.remaining_ms
        for _ in range(500):
            dt = rnd.choice([16.7, 33.4, -20, 0, float("nan"), 250])
            ends += sum(e.kind is FeedbackKind.END for e in s.tick(dt))
            assert s.clock.remaining_ms <= last
            assert s.clock.remaining_ms >= 0
            last = s.clock.remaining_ms
        assert ends == 1
        assert last == 0

    def test_restart_after_end(self, session):
        session.tick(30_000)
        session.start()
        assert session.running
        assert session.clock.remaining_ms == session.cfg.duration_ms


class TestSinks:
    def test_sinks_receive_events(self, scripted, store):
        seen = []

        class Recorder:
            def notify(self, event):
                seen.append(event.kind)

        s = GameSession(rng=scripted, store=store, sinks=[Recorder()])
        s.start()
        s.tap(1, 1)
        s.tick(30_000)
        assert seen == [FeedbackKind.START, FeedbackKind.MISS, FeedbackKind.END]

    def test_broken_sink_does_not_affect_round(self, scripted, store):
        class Broken:
            def notify(self, event):
                raise RuntimeError("no speaker")

        s = GameSession(rng=scripted, store=store, sinks=[Broken()])
        s.start()
        x, y = force(s, 0, HoleType.PRIMARY)
        events = s.tap(x, y)
        assert events[0].kind is FeedbackKind.HIT
        assert s.score == 30


class TestSnapshot:
    def test_snapshot_fields(self, session):
        session.tick(1500)
        x, y = force(session, 0, HoleType.BONUS)
        session.tap(x, y)
        snap = session.snapshot()
        assert snap.running
        assert snap.time_remaining_ms == 28_500
        assert snap.seconds_left == 29
        assert snap.multiplier == 2
        assert snap.multiplier_remaining_ms == 8000
        assert snap.intensity == pytest.approx(1.0 + 0.05 * 1.2)
        assert len(snap.holes) == 7
        assert len(snap.particles) == 16

    def test_snapshot_is_a_copy(self, session):
        force(session, 0, HoleType.PRIMARY)
        snap = session.snapshot()
        snap.holes[0].type = HoleType.NONE
        assert session.holes[0].active

    def test_screen_size_drives_hit_geometry(self, scripted, store):
        s = GameSession(screen_size=(400, 800), rng=scripted, store=store)
        s.start()
        x, y = force(s, 1, HoleType.PRIMARY)
        assert math.isclose(x, 200)
        assert s.tap(x, y)[0].kind is FeedbackKind.HIT
