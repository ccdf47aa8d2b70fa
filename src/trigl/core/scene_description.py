# どこで: `src/trigl/core/scene_description.py`。
# 何を: `datos.json`（色・中心・サイズ）を 1 度だけ読み込み、SceneDescription に詰めて返す。
# なぜ: 静的シーンの初期値をファイルで差し替えられるようにするため。

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

_logger = logging.getLogger(__name__)

DEFAULT_SCENE_DESCRIPTION_PATH = Path("datos.json")


class SceneDescriptionError(RuntimeError):
    """シーン記述ファイルを開けない/解析できない場合の例外。"""


@dataclass(frozen=True, slots=True)
class SceneDescription:
    """シーン記述ファイルの内容。"""

    color: tuple[int, int, int, int]
    center: tuple[float, float, float]
    size: float


def _section(root: dict[str, Any], key: str) -> dict[str, Any]:
    value = root.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _as_uint8(value: Any) -> int:
    """欠損/不正値は 0、範囲外は unsigned byte として切り詰める。"""
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(float(value)) & 0xFF
    except (TypeError, ValueError, OverflowError):
        return 0


def _as_double(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0


def parse_scene_description(data: Any) -> SceneDescription:
    """解析済み JSON から SceneDescription を作る。

    Notes
    -----
    値の検証はしない。欠けているフィールドは 0 として読むため、
    退化した（見えない）三角形になり得る。
    """

    if not isinstance(data, dict):
        raise SceneDescriptionError(
            f"シーン記述のルートは object である必要があります: got={type(data).__name__}"
        )

    color = _section(data, "color")
    center = _section(data, "center")
    return SceneDescription(
        color=(
            _as_uint8(color.get("r")),
            _as_uint8(color.get("g")),
            _as_uint8(color.get("b")),
            _as_uint8(color.get("a")),
        ),
        center=(
            _as_double(center.get("x")),
            _as_double(center.get("y")),
            _as_double(center.get("z")),
        ),
        size=_as_double(data.get("size")),
    )


def load_scene_description(path: str | Path = DEFAULT_SCENE_DESCRIPTION_PATH) -> SceneDescription:
    """JSON ファイルを読み込んで SceneDescription を返す。

    Raises
    ------
    SceneDescriptionError
        ファイルを読めない、または JSON として解析できない場合。
    """

    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SceneDescriptionError(f"シーン記述ファイルを開けません: {p}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SceneDescriptionError(f"シーン記述ファイルの解析に失敗しました: {p}") from exc

    description = parse_scene_description(data)
    _logger.info(
        "Loaded scene description: path=%s color=%s center=%s size=%s",
        p,
        description.color,
        description.center,
        description.size,
    )
    return description


__all__ = [
    "DEFAULT_SCENE_DESCRIPTION_PATH",
    "SceneDescription",
    "SceneDescriptionError",
    "load_scene_description",
    "parse_scene_description",
]
