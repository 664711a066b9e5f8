import pygame
import pytest

from nbodysim.app import TrailManager, detect_implementation, parse_body_count
from nbodysim.body import Body, Vec2


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/usr/local/bin/nbody_simulation_omp", "OpenMP"),
        ("./bin/nbody_OpenMP", "OpenMP"),
        ("openmp_runner", "OpenMP"),
        ("bin/nbody_simulation_serial", "Serial"),
        ("C:\\tools\\Serial_nbody.exe", "Serial"),
        ("nbody", "Unknown"),
    ],
)
def test_detect_implementation(path, expected):
    assert detect_implementation(path) == expected


def test_detect_implementation_ignores_directory_names():
    assert detect_implementation("/omp/serial/nbody") == "Unknown"


def test_parse_body_count_default_without_arguments():
    assert parse_body_count([]) == 250


def test_parse_body_count_reads_first_argument():
    assert parse_body_count(["500", "ignored"]) == 500


@pytest.mark.parametrize("arg", ["1", "0", "-5", "abc", "", "99999999999"])
def test_parse_body_count_falls_back(arg, capsys):
    assert parse_body_count([arg]) == 100
    assert "Using default: 100" in capsys.readouterr().out


def test_parse_body_count_accepts_numeric_prefix():
    assert parse_body_count(["42xyz"]) == 42
    assert parse_body_count(["  7"]) == 7


def _body(x, y, color):
    return Body(Vec2(x, y), Vec2(0.0, 0.0), 1.0, 5.0, color)


def test_trails_start_disabled_and_ignore_updates():
    trails = TrailManager(100, 80)
    assert trails.enabled is False
    trails.update([_body(50, 40, (200, 100, 50))])
    assert tuple(trails.surface.get_at((50, 40)))[:3] == (0, 0, 0)


def test_trail_update_draws_bodies_when_enabled():
    trails = TrailManager(100, 80)
    trails.toggle()
    assert trails.enabled is True
    trails.update([_body(50, 40, (200, 100, 50))])
    assert tuple(trails.surface.get_at((50, 40)))[:3] == (200, 100, 50)
    assert tuple(trails.surface.get_at((5, 5)))[:3] != (200, 100, 50)


def test_toggle_off_clears_canvas():
    trails = TrailManager(100, 80)
    trails.toggle()
    trails.update([_body(20, 20, (200, 100, 50))])
    trails.toggle()
    assert trails.enabled is False
    assert tuple(trails.surface.get_at((20, 20)))[:3] == (0, 0, 0)


def test_draw_copies_only_when_enabled():
    trails = TrailManager(60, 60)
    trails.toggle()
    trails.update([_body(30, 30, (200, 100, 50))])

    target = pygame.Surface((60, 60))
    target.fill((255, 255, 255))
    trails.toggle()
    trails.draw(target)
    assert tuple(target.get_at((30, 30)))[:3] == (255, 255, 255)

    trails.toggle()
    trails.update([_body(30, 30, (200, 100, 50))])
    trails.draw(target)
    assert tuple(target.get_at((30, 30)))[:3] == (200, 100, 50)


def test_clear_resets_canvas_to_black():
    trails = TrailManager(40, 40)
    trails.toggle()
    trails.update([_body(10, 10, (200, 100, 50))])
    trails.clear()
    assert trails.enabled is True
    assert tuple(trails.surface.get_at((10, 10)))[:3] == (0, 0, 0)