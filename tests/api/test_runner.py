"""run()（設定 → シーン → ウィンドウ → ループ → 解放）の配線テスト。"""

from __future__ import annotations

from pathlib import Path

import pytest

from trigl.api import runner
from trigl.core.runtime_config import set_config_path
from trigl.core.scene import Scene


@pytest.fixture(autouse=True)
def _reset_runtime_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield
    set_config_path(None)


class _FakeWindow:
    def __init__(self, *, close_on_poll: int | None = None) -> None:
        self.has_exit = False
        self.handlers: list[dict[str, object]] = []
        self._close_on_poll = close_on_poll
        self._polls = 0

    def push_handlers(self, **handlers: object) -> None:
        self.handlers.append(handlers)

    def remove_handlers(self, **handlers: object) -> None:
        self.handlers.remove(handlers)

    def switch_to(self) -> None:
        return None

    def dispatch_events(self) -> None:
        self._polls += 1
        if self._close_on_poll is not None and self._polls >= self._close_on_poll:
            self.has_exit = True

    def flip(self) -> None:
        return None


class _FakeWindowSystem:
    instances: list["_FakeWindowSystem"] = []
    close_on_poll: int | None = None

    def __init__(self, scene: Scene, *, settings: object) -> None:
        self.scene = scene
        self.settings = settings
        self.window = _FakeWindow(close_on_poll=_FakeWindowSystem.close_on_poll)
        self.closed = 0
        _FakeWindowSystem.instances.append(self)

    def draw_frame(self) -> None:
        raise RuntimeError("draw failed")

    def close(self) -> None:
        self.closed += 1


@pytest.fixture
def window_systems(monkeypatch: pytest.MonkeyPatch) -> list[_FakeWindowSystem]:
    _FakeWindowSystem.instances = []
    _FakeWindowSystem.close_on_poll = None
    monkeypatch.setattr(runner, "SceneWindowSystem", _FakeWindowSystem)
    return _FakeWindowSystem.instances


def test_run_closes_window_system_when_loop_raises(window_systems: list[_FakeWindowSystem]) -> None:
    with pytest.raises(RuntimeError, match="draw failed"):
        runner.run(variant="animated")

    (system,) = window_systems
    assert system.closed == 1
    assert system.window.handlers == []


def test_run_closes_window_system_after_quit(window_systems: list[_FakeWindowSystem]) -> None:
    _FakeWindowSystem.close_on_poll = 1

    runner.run(variant="animated")

    (system,) = window_systems
    assert system.closed == 1
    assert isinstance(system.scene, Scene)
    assert system.scene.camera is not None
    assert system.settings.fps == 60.0


def test_run_propagates_scene_description_errors_before_window(
    window_systems: list[_FakeWindowSystem],
) -> None:
    from trigl.core.scene_description import SceneDescriptionError

    # カレントディレクトリに datos.json が無い。
    with pytest.raises(SceneDescriptionError):
        runner.run(variant="static")

    assert window_systems == []
