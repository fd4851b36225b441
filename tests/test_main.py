import pygame

from tilecrawl.engine import Engine
from tilecrawl.main import main
from tilecrawl.render.window import Window


def test_bad_config_exits_before_opening_window(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("map_width: 500\n", encoding="utf-8")
    assert main(["--config", str(path)]) == 2


def test_missing_config_file(tmp_path):
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 2


def _track_teardown(monkeypatch):
    calls = []
    original = Window.teardown

    def teardown(self):
        calls.append(self)
        original(self)

    monkeypatch.setattr(Window, "teardown", teardown)
    return calls


def test_escape_ends_a_clean_run(monkeypatch):
    teardowns = _track_teardown(monkeypatch)
    original_present = Window.present

    def present_then_press_escape(self):
        original_present(self)
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0, unicode="\x1b"))

    monkeypatch.setattr(Window, "present", present_then_press_escape)
    assert main([]) == 0
    assert len(teardowns) == 1
    assert not pygame.get_init()


def test_crash_in_loop_is_logged_and_window_torn_down(monkeypatch, caplog):
    teardowns = _track_teardown(monkeypatch)

    def boom(self):
        raise RuntimeError("renderer exploded")

    monkeypatch.setattr(Engine, "run", boom)
    assert main([]) == 1
    assert len(teardowns) == 1
    assert "Unhandled exception in game loop" in caplog.text
    assert "renderer exploded" in caplog.text


def test_window_that_fails_to_open_returns_error(monkeypatch, caplog):
    def no_display(*args, **kwargs):
        raise pygame.error("no display available")

    monkeypatch.setattr(pygame.display, "set_mode", no_display)
    assert main([]) == 1
    assert "no display available" in caplog.text
    assert not pygame.get_init()
