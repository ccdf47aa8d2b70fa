# どこで: `src/trigl/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: ウィンドウ寸法・fps・シーン種別などを、コードを変えずに差し替えられるようにするため。

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

SCENE_VARIANTS = ("static", "animated")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """trigl の実行時設定。"""

    config_path: Path | None
    window_caption: str
    window_size: tuple[int, int]
    fps: float
    background_color: tuple[float, float, float]
    scene_variant: str
    scene_description_path: Path
    camera_fov_deg: float
    camera_near: float
    camera_far: float
    camera_position: tuple[float, float, float]
    animation_step_deg: float
    animation_axis: tuple[float, float, float]
    log_level: int


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    p = Path(str(path)).expanduser()
    _EXPLICIT_CONFIG_PATH = p
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".trigl" / "config.yaml",
        home / ".config" / "trigl" / "config.yaml",
    )


def _expand_path_text(text: str) -> str:
    return os.path.expanduser(str(text))


def _as_optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    return Path(_expand_path_text(s))


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int_pair(value: Any, *, key: str) -> tuple[int, int] | None:
    if value is None:
        return None
    try:
        seq = list(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}") from exc
    if len(seq) != 2:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}")
    try:
        x = int(seq[0])
        y = int(seq[1])
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y] の整数配列である必要があります: got={value!r}") from exc
    return (x, y)


def _as_float_triple(value: Any, *, key: str) -> tuple[float, float, float] | None:
    if value is None:
        return None
    try:
        seq = list(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y, z] の配列である必要があります: got={value!r}") from exc
    if len(seq) != 3:
        raise RuntimeError(f"{key} は [x, y, z] の配列である必要があります: got={value!r}")
    try:
        return (float(seq[0]), float(seq[1]), float(seq[2]))
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y, z] の数値配列である必要があります: got={value!r}") from exc


def _as_float(value: Any, *, key: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _as_log_level(value: Any, *, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    level = getattr(logging, str(value).strip().upper(), None)
    if not isinstance(level, int):
        raise RuntimeError(f"{key} はログレベル名である必要があります: got={value!r}")
    return level


def _require(value: Any, *, key: str) -> Any:
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    return value


def _merge_payload(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """mapping 同士は再帰的に、それ以外は override 側で上書きした dict を返す。"""

    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _merge_payload(current, value)
        else:
            merged[key] = value
    return merged


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    import yaml

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("trigl")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="trigl/resource/default_config.yaml")


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。"""

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _merge_payload(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge_payload(payload, _load_yaml_config(explicit_path))

    version = _require(payload.get("version"), key="version")
    try:
        version_i = int(version)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    window = _as_mapping(payload.get("window"), key="window")
    window_caption = str(_require(window.get("caption"), key="window.caption"))
    window_size = _require(_as_int_pair(window.get("size"), key="window.size"), key="window.size")
    if window_size[0] <= 0 or window_size[1] <= 0:
        raise ValueError(f"window.size は正の値である必要があります: got={window_size}")
    fps = _require(_as_float(window.get("fps"), key="window.fps"), key="window.fps")
    if fps <= 0:
        raise ValueError(f"window.fps は正の値である必要があります: got={fps}")

    render = _as_mapping(payload.get("render"), key="render")
    background_color = _require(
        _as_float_triple(render.get("background_color"), key="render.background_color"),
        key="render.background_color",
    )

    scene = _as_mapping(payload.get("scene"), key="scene")
    scene_variant = str(_require(scene.get("variant"), key="scene.variant")).strip().lower()
    if scene_variant not in SCENE_VARIANTS:
        raise ValueError(
            f"scene.variant は {SCENE_VARIANTS} のいずれかである必要があります: got={scene_variant!r}"
        )
    scene_description_path = _require(
        _as_optional_path(scene.get("description_path")),
        key="scene.description_path",
    )

    camera = _as_mapping(payload.get("camera"), key="camera")
    camera_fov_deg = _require(_as_float(camera.get("fov_deg"), key="camera.fov_deg"), key="camera.fov_deg")
    camera_near = _require(_as_float(camera.get("near"), key="camera.near"), key="camera.near")
    camera_far = _require(_as_float(camera.get("far"), key="camera.far"), key="camera.far")
    camera_position = _require(
        _as_float_triple(camera.get("position"), key="camera.position"),
        key="camera.position",
    )

    animation = _as_mapping(payload.get("animation"), key="animation")
    animation_step_deg = _require(
        _as_float(animation.get("step_deg"), key="animation.step_deg"),
        key="animation.step_deg",
    )
    animation_axis = _require(
        _as_float_triple(animation.get("axis"), key="animation.axis"),
        key="animation.axis",
    )
    if animation_axis == (0.0, 0.0, 0.0):
        raise ValueError("animation.axis はゼロベクトルにできません")

    log = _as_mapping(payload.get("logging"), key="logging")
    log_level = _require(_as_log_level(log.get("level"), key="logging.level"), key="logging.level")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        window_caption=window_caption,
        window_size=window_size,
        fps=float(fps),
        background_color=background_color,
        scene_variant=scene_variant,
        scene_description_path=scene_description_path,
        camera_fov_deg=float(camera_fov_deg),
        camera_near=float(camera_near),
        camera_far=float(camera_far),
        camera_position=camera_position,
        animation_step_deg=float(animation_step_deg),
        animation_axis=animation_axis,
        log_level=int(log_level),
    )
    _CONFIG_CACHE = cfg
    return cfg


__all__ = ["SCENE_VARIANTS", "RuntimeConfig", "runtime_config", "set_config_path"]
