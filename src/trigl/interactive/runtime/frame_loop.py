# どこで: `src/trigl/interactive/runtime/frame_loop.py`。
# 何を: pyglet ウィンドウ 1 枚を固定フレーム時間で回す手動ループを提供する。
# なぜ: イベント処理→描画→flip→sleep の順序を 1 箇所に集約するため。

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class LoopState(enum.Enum):
    """ループの状態。STOPPED は終端で、再開しない。"""

    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(frozen=True, slots=True)
class WindowTask:
    """pyglet window と「flip しない描画関数」を束ねる。"""

    # 注: pyglet の Window 型は環境/バージョン差があるため Any に寄せる。
    window: Any

    # 1フレーム分の描画処理（back buffer へ描くだけ）。
    # `switch_to()` / `flip()` は FrameLoop 側が担当する前提。
    draw_frame: Callable[[], None]


def remaining_frame_time(elapsed: float, frame_dt: float) -> float:
    """フレーム予算の残り時間を返す。予算超過時は 0.0（負にはしない）。"""
    return max(0.0, float(frame_dt) - float(elapsed))


class FrameLoop:
    """ウィンドウを閉じるまで描画を繰り返す。

    `draw_frame()` は back buffer へ描画するだけにし、`flip()` はこのループが行う。
    """

    def __init__(
        self,
        task: WindowTask,
        *,
        fps: float = 60.0,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """ループを初期化する。

        Parameters
        ----------
        task : WindowTask
            1 フレームごとに描画したいウィンドウと描画処理。
        fps : float
            目標フレームレート。`<=0` の場合はスロットリングしない。
        clock : Callable[[], float]
            秒単位の単調時計。
        sleep : Callable[[float], None]
            残り時間だけブロックする関数。
        """

        self._task = task
        self._fps = float(fps)
        self._clock = clock
        self._sleep = sleep
        self._state = LoopState.RUNNING
        self._frame_count = 0

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def frame_count(self) -> int:
        """描画（draw_frame + flip）を行った回数。"""
        return int(self._frame_count)

    @property
    def frame_dt(self) -> float:
        return 1.0 / self._fps if self._fps > 0 else 0.0

    def stop(self, *_: object) -> bool:
        """ループを止める（on_close から呼ばれる）。

        True（EVENT_HANDLED）を返すため、pyglet 既定の on_close（即 close）は呼ばれない。
        window の close は呼び出し側が行う。
        """
        # pyglet の on_close から呼ばれるコールバックは引数が来る場合があるため *args を受ける。
        self._state = LoopState.STOPPED
        return True

    def run(self) -> None:
        """quit を観測するまでループを実行する。"""

        window = self._task.window
        draw_frame = self._task.draw_frame
        frame_dt = self.frame_dt

        window.push_handlers(on_close=self.stop)
        _logger.info("Frame loop started: fps=%s", self._fps)
        try:
            # 1フレームは「イベント処理 → 描画 → flip → sleep」の順。
            while self._state is LoopState.RUNNING:
                t0 = self._clock()

                window.switch_to()
                window.dispatch_events()

                # quit を観測したら、このフレームの描画はしない。
                if self._state is LoopState.STOPPED or window.has_exit:
                    self._state = LoopState.STOPPED
                    break

                window.switch_to()
                draw_frame()
                window.flip()
                self._frame_count += 1

                elapsed = self._clock() - t0
                wait = remaining_frame_time(elapsed, frame_dt)
                if wait > 0.0:
                    self._sleep(wait)
                elif frame_dt > 0.0:
                    _logger.debug(
                        "Frame over budget: elapsed=%.4fs budget=%.4fs", elapsed, frame_dt
                    )
        finally:
            self._state = LoopState.STOPPED
            window.remove_handlers(on_close=self.stop)
            _logger.info("Frame loop stopped: frames=%d", self._frame_count)


__all__ = ["FrameLoop", "LoopState", "WindowTask", "remaining_frame_time"]
