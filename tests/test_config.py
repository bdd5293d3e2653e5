import pytest

from holetap.app.loader import game_root_for, load_game_manifest, load_game_module
from holetap.core import BONUS_MULTIPLIER, GameSession, HoleType, MemoryBestScore, RandomSource
from holetap.core.config import RoundConfig


def test_defaults_match_the_shipped_game():
    cfg = RoundConfig()
    assert cfg.duration_ms == 30_000
    assert cfg.base_spawn_rate == 0.016
    assert cfg.bonus_chance == 0.16
    assert cfg.primary_points == 30
    assert cfg.bonus_duration_ms == 8000
    assert BONUS_MULTIPLIER == 2


def test_from_options_overrides():
    cfg = RoundConfig.from_options({
        "duration_ms": 10_000,
        "primary_points": "50",
        "cooldown_ms": [100, 200],
    })
    assert cfg.duration_ms == 10_000
    assert cfg.primary_points == 50
    assert isinstance(cfg.primary_points, int)
    assert cfg.cooldown_ms == (100.0, 200.0)
    assert cfg.bonus_chance == 0.16


def test_fractional_times_are_kept():
    cfg = RoundConfig.from_options({
        "duration_ms": 1500.5,
        "bonus_duration_ms": 7999.9,
        "hit_flash_ms": 0.5,
        "hit_particle_life_ms": 250.25,
    })
    assert cfg.duration_ms == 1500.5
    assert cfg.bonus_duration_ms == 7999.9
    assert cfg.hit_flash_ms == 0.5
    assert cfg.hit_particle_life_ms == 250.25


def test_short_round_below_one_ms_is_accepted():
    assert RoundConfig.from_options({"duration_ms": 0.5}).duration_ms == 0.5


def test_from_options_empty():
    assert RoundConfig.from_options(None) == RoundConfig()


@pytest.mark.parametrize("options", [
    {"intensity_ramp": 2.0},
    {"bonus_multiplier": 5},
    {"bonus_multiplier": 2},
    {"cooldown_ms": 300},
    {"cooldown_ms": [500, 100]},
    {"cooldown_ms": ["a", 100]},
    {"duration_ms": 0},
    {"duration_ms": float("nan")},
    {"bonus_chance": 1.5},
    {"base_spawn_rate": -0.1},
    {"bonus_duration_ms": "eight"},
    {"bonus_duration_ms": 0},
    {"hit_flash_ms": None},
    {"primary_points": 2.5},
    {"primary_points": True},
    {"hit_particles": -1},
])
def test_bad_options_raise(options):
    with pytest.raises(ValueError):
        RoundConfig.from_options(options)


@pytest.mark.parametrize("options, name", [
    ({"bonus_duration_ms": "eight"}, "bonus_duration_ms"),
    ({"hit_flash_ms": None}, "hit_flash_ms"),
    ({"duration_ms": -5}, "duration_ms"),
    ({"bonus_multiplier": 5}, "bonus_multiplier"),
])
def test_errors_name_the_option(options, name):
    with pytest.raises(ValueError, match=name):
        RoundConfig.from_options(options)


def test_bonus_hit_always_doubles():
    cfg = RoundConfig.from_options({"bonus_duration_ms": 500})
    s = GameSession(cfg=cfg, rng=RandomSource(1), store=MemoryBestScore())
    s.start()
    s.holes[0].activate(s.now, HoleType.BONUS, 600, 300)
    s.tap(*s.layout.hit_center(s.holes[0]))
    assert s.multiplier == 2
    assert s.scoreboard.multiplier_expires_at == 500


def test_shipped_manifest_builds_a_config():
    manifest = load_game_manifest(game_root_for("tap-rush"))
    assert manifest["title"] == "Tap Rush"
    cfg = RoundConfig.from_options(manifest["options"])
    assert cfg == RoundConfig()


def test_game_module_loads():
    module = load_game_module(game_root_for("tap-rush"))
    assert callable(module.get_game)


def test_missing_game_and_manifest(tmp_path):
    with pytest.raises(FileNotFoundError):
        game_root_for("no-such-game", games_dir=tmp_path)
    (tmp_path / "empty").mkdir()
    with pytest.raises(FileNotFoundError):
        load_game_manifest(tmp_path / "empty")
    with pytest.raises(FileNotFoundError):
        load_game_module(tmp_path / "empty")


def test_manifest_without_options(tmp_path):
    (tmp_path / "manifest.yaml").write_text("title: Bare\noptions:\n")
    assert load_game_manifest(tmp_path)["options"] == {}
