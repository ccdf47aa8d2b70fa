"""FrameLoop（固定フレーム時間のループ）のテスト。"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from trigl.interactive.runtime.frame_loop import (
    FrameLoop,
    LoopState,
    WindowTask,
    remaining_frame_time,
)


class _FakeWindow:
    """dispatch_events の n 回目で on_close を発火する偽ウィンドウ。"""

    def __init__(self, *, close_on_poll: int | None = None, exit_on_poll: int | None = None) -> None:
        self.has_exit = False
        self.polls = 0
        self.flips = 0
        self.handlers: list[dict[str, object]] = []
        self._close_on_poll = close_on_poll
        self._exit_on_poll = exit_on_poll

    def push_handlers(self, **handlers: object) -> None:
        self.handlers.append(handlers)

    def remove_handlers(self, **handlers: object) -> None:
        self.handlers.remove(handlers)

    def switch_to(self) -> None:
        return None

    def dispatch_events(self) -> None:
        self.polls += 1
        if self._close_on_poll is not None and self.polls >= self._close_on_poll:
            for handlers in list(self.handlers):
                on_close = handlers.get("on_close")
                if callable(on_close):
                    on_close()
        if self._exit_on_poll is not None and self.polls >= self._exit_on_poll:
            self.has_exit = True

    def flip(self) -> None:
        self.flips += 1


def _clock(values: list[float]) -> Callable[[], float]:
    it: Iterator[float] = iter(values)
    return lambda: next(it)


def _loop(window: _FakeWindow, draws: list[int], sleeps: list[float], **kwargs: object) -> FrameLoop:
    task = WindowTask(window=window, draw_frame=lambda: draws.append(1))
    kwargs.setdefault("sleep", sleeps.append)
    return FrameLoop(task, **kwargs)  # type: ignore[arg-type]


def test_quit_on_first_poll_draws_nothing() -> None:
    window = _FakeWindow(close_on_poll=1)
    draws: list[int] = []
    sleeps: list[float] = []
    loop = _loop(window, draws, sleeps)

    assert loop.state is LoopState.RUNNING
    loop.run()

    assert loop.state is LoopState.STOPPED
    assert draws == []
    assert window.flips == 0
    assert sleeps == []
    assert loop.frame_count == 0


def test_loop_draws_and_flips_once_per_frame_until_close() -> None:
    window = _FakeWindow(close_on_poll=4)
    draws: list[int] = []
    sleeps: list[float] = []
    loop = _loop(window, draws, sleeps)

    loop.run()

    assert len(draws) == 3
    assert window.flips == 3
    assert window.polls == 4
    assert loop.frame_count == 3


def test_has_exit_stops_the_loop() -> None:
    window = _FakeWindow(exit_on_poll=2)
    draws: list[int] = []
    sleeps: list[float] = []
    loop = _loop(window, draws, sleeps)

    loop.run()

    assert loop.state is LoopState.STOPPED
    assert len(draws) == 1


def test_handlers_are_removed_after_run() -> None:
    window = _FakeWindow(close_on_poll=1)
    loop = _loop(window, [], [])
    loop.run()
    assert window.handlers == []


def test_stop_consumes_the_close_event() -> None:
    loop = _loop(_FakeWindow(), [], [])
    assert loop.stop() is True
    assert loop.state is LoopState.STOPPED


def test_fast_frame_sleeps_for_the_remaining_budget() -> None:
    window = _FakeWindow(close_on_poll=2)
    sleeps: list[float] = []
    # frame 1: t0=0.0, end=0.005 / frame 2: t0=1.0（この poll で閉じる）
    loop = _loop(window, [], sleeps, fps=60.0, clock=_clock([0.0, 0.005, 1.0]))

    loop.run()

    assert sleeps == [pytest.approx(1.0 / 60.0 - 0.005)]


def test_slow_frame_does_not_sleep() -> None:
    window = _FakeWindow(close_on_poll=2)
    sleeps: list[float] = []
    loop = _loop(window, [], sleeps, fps=60.0, clock=_clock([0.0, 0.05, 1.0]))

    loop.run()

    assert sleeps == []


def test_non_positive_fps_disables_throttling() -> None:
    window = _FakeWindow(close_on_poll=3)
    sleeps: list[float] = []
    loop = _loop(window, [], sleeps, fps=0.0, clock=_clock([0.0, 0.0, 0.0, 0.0, 0.0]))

    loop.run()

    assert loop.frame_dt == 0.0
    assert sleeps == []


def test_state_is_stopped_when_draw_raises() -> None:
    window = _FakeWindow()

    def boom() -> None:
        raise RuntimeError("draw failed")

    loop = FrameLoop(WindowTask(window=window, draw_frame=boom), sleep=lambda _: None)
    with pytest.raises(RuntimeError):
        loop.run()
    assert loop.state is LoopState.STOPPED
    assert window.handlers == []


@pytest.mark.parametrize(
    ("elapsed", "expected"),
    [
        (0.0, 1.0 / 60.0),
        (0.01, 1.0 / 60.0 - 0.01),
        (1.0 / 60.0, 0.0),
        (0.5, 0.0),
    ],
)
def test_remaining_frame_time_is_clamped_to_zero(elapsed: float, expected: float) -> None:
    assert remaining_frame_time(elapsed, 1.0 / 60.0) == pytest.approx(expected)
    assert remaining_frame_time(elapsed, 1.0 / 60.0) >= 0.0
