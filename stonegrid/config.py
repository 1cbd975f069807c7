# config.py
"""
Settings for stonegrid.

Values come from stonegrid.env (next to this package) via python-dotenv, then
from the process environment. Variables already set in the environment win
over the file. Everything has a default, so the file is optional.
"""
import os
from typing import Tuple

from dotenv import load_dotenv

ENV_PATH = os.path.join(os.path.dirname(__file__), "stonegrid.env")


# Helpers to read env with defaults
def getf(name: str, default: float) -> float:
    v = os.getenv(name)
    return float(v) if v is not None else float(default)


def geti(name: str, default: int) -> int:
    v = os.getenv(name)
    return int(v) if v is not None else int(default)


def gets(name: str, default: str) -> str:
    v = os.getenv(name)
    return v if v is not None else default


def getb(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


def get_rgb(name: str, default: str) -> Tuple[float, float, float]:
    rgb = gets(name, default)
    rgb = rgb.strip().lstrip('#')
    if len(rgb) != 6:
        raise ValueError(f"{name} must be a #RRGGBB color, got {rgb!r}")
    return tuple(
        i / 255
        for i in (
            int(rgb[j:j + 2], 16)
            for j in range(0, 6, 2)
        )
    )


def load_settings(env_path: str = ENV_PATH) -> dict:
    if os.path.exists(env_path):
        load_dotenv(env_path, override=False)
    settings = {}
    settings['env_path'] = env_path
    settings['board_size'] = geti("BOARD_SIZE", 19)
    settings['save_path'] = gets("SAVE_PATH", "save.gs")
    settings['window_width'] = geti("WINDOW_WIDTH", 800)
    settings['window_height'] = geti("WINDOW_HEIGHT", 800)
    settings['window_title'] = gets("WINDOW_TITLE", "Go")

    # Colors (r,g,b)
    settings['board_bg'] = get_rgb("BOARD_BG", "#4B6B58")
    settings['foreground'] = get_rgb("FOREGROUND", "#FFFFFF")
    settings['stone_black'] = get_rgb("STONE_BLACK", "#000000")
    settings['stone_white'] = get_rgb("STONE_WHITE", "#FFFFFF")
    settings['hover_ring'] = get_rgb("HOVER_RING", "#FF1428")
    settings['hover_ring_alpha'] = getf("HOVER_RING_ALPHA", 0.2)

    settings['line_width_factor'] = getf("LINE_WIDTH_FACTOR", 0.05)
    settings['stone_radius_factor'] = getf("STONE_RADIUS_FACTOR", 0.5)
    settings['font_scale'] = getf("FONT_SCALE", 0.8)
    settings['font_family'] = gets("FONT_FAMILY", "Sans")

    settings['debug'] = getb("STONEGRID_DEBUG", False)
    return settings


DEFAULT_SETTINGS = load_settings()
