# どこで: `src/landscape/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: ウィンドウ寸法・表示モード・アニメーション速度・スタック不整合の扱いをコード外から切り替えられるようにするため。

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

from landscape.core.display_mode import DisplayMode
from landscape.core.frame_context import UNDERFLOW_POLICIES, UnderflowPolicy


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """landscape の実行時設定。"""

    config_path: Path | None
    output_dir: Path
    canvas_size: tuple[int, int]
    caption: str
    background_color: tuple[float, float, float]
    fps: float
    mode: DisplayMode
    point_size: float
    rotation_speed: float
    translation_speed: float
    translation_range: float
    underflow: UnderflowPolicy


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
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".landscape" / "config.yaml",
        home / ".config" / "landscape" / "config.yaml",
    )


def _expand_path_text(text: str) -> str:
    return os.path.expandvars(os.path.expanduser(str(text)))


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


def _as_rgb01(value: Any, *, key: str) -> tuple[float, float, float] | None:
    if value is None:
        return None
    try:
        r, g, b = (float(v) for v in value)
    except Exception as exc:
        raise RuntimeError(f"{key} は [r, g, b]（0..1）の配列である必要があります: got={value!r}") from exc
    return (r, g, b)


def _as_float(value: Any, *, key: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _require(value: Any, *, key: str) -> Any:
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    return value


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

    blob = (
        resources.files("landscape")
        .joinpath("resource", "default_config.yaml")
        .read_text(encoding="utf-8")
    )
    return _load_yaml_text(blob, source="landscape/resource/default_config.yaml")


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """セクション単位で 1 段だけ深くマージした dict を返す（後勝ち）。"""

    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            merged = dict(out[key])
            merged.update(value)
            out[key] = merged
        else:
            out[key] = value
    return out


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.landscape/config.yaml` / `~/.config/landscape/config.yaml`
    3) `set_config_path()` / `run(..., config_path=...)` の明示パス
    """

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
        payload = _merge(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge(payload, _load_yaml_config(explicit_path))

    version = _require(payload.get("version"), key="version")
    try:
        version_i = int(version)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    paths = _as_mapping(payload.get("paths"), key="paths")
    output_dir = _require(_as_optional_path(paths.get("output_dir")), key="paths.output_dir")

    window = _as_mapping(payload.get("window"), key="window")
    canvas_size = _require(
        _as_int_pair(window.get("canvas_size"), key="window.canvas_size"),
        key="window.canvas_size",
    )
    if canvas_size[0] <= 0 or canvas_size[1] <= 0:
        raise ValueError(f"window.canvas_size は正の値である必要があります: got={canvas_size}")
    caption = str(window.get("caption") or "landscape")
    background_color = _require(
        _as_rgb01(window.get("background_color"), key="window.background_color"),
        key="window.background_color",
    )
    fps = _require(_as_float(window.get("fps"), key="window.fps"), key="window.fps")

    render = _as_mapping(payload.get("render"), key="render")
    mode_text = _require(render.get("mode"), key="render.mode")
    try:
        mode = DisplayMode.parse(mode_text)
    except ValueError as exc:
        raise RuntimeError(f"render.mode が不正です: got={mode_text!r}") from exc
    point_size = _require(_as_float(render.get("point_size"), key="render.point_size"), key="render.point_size")
    if point_size <= 0:
        raise ValueError(f"render.point_size は正の値である必要があります: got={point_size}")

    animation = _as_mapping(payload.get("animation"), key="animation")
    rotation_speed = _require(
        _as_float(animation.get("rotation_speed"), key="animation.rotation_speed"),
        key="animation.rotation_speed",
    )
    translation_speed = _require(
        _as_float(animation.get("translation_speed"), key="animation.translation_speed"),
        key="animation.translation_speed",
    )
    translation_range = _require(
        _as_float(animation.get("translation_range"), key="animation.translation_range"),
        key="animation.translation_range",
    )
    if translation_range < 0:
        raise ValueError(
            f"animation.translation_range は 0 以上である必要があります: got={translation_range}"
        )

    stack = _as_mapping(payload.get("transform_stack"), key="transform_stack")
    underflow = str(_require(stack.get("underflow"), key="transform_stack.underflow"))
    if underflow not in UNDERFLOW_POLICIES:
        raise RuntimeError(
            f"transform_stack.underflow は {UNDERFLOW_POLICIES} のいずれかです: got={underflow!r}"
        )

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        output_dir=output_dir,
        canvas_size=canvas_size,
        caption=caption,
        background_color=background_color,
        fps=float(fps),
        mode=mode,
        point_size=float(point_size),
        rotation_speed=float(rotation_speed),
        translation_speed=float(translation_speed),
        translation_range=float(translation_range),
        underflow=underflow,  # type: ignore[arg-type]
    )
    _CONFIG_CACHE = cfg
    return cfg


def output_root_dir() -> Path:
    """出力ファイルを保存する既定ルートディレクトリを返す。"""

    return Path(runtime_config().output_dir)


__all__ = ["RuntimeConfig", "output_root_dir", "runtime_config", "set_config_path"]
