# config.py
import json
import os

DEFAULT_CONFIG = {
    # ===== Physics (reference units, one step per frame) =====
    "gravity": 0.5,
    "friction": 0.90,
    "bounce": -0.5,
    "rest_vy_threshold": 1.0,
    "win_max_speed": 1.5,
    "stop_max_speed": 0.1,
    "power_scale": 0.15,

    # ===== Course =====
    "max_holes": 5,
    "ground_height": 20,
    "ball_radius": 5,
    "hole_radius": 8,
    "ball_start_x": 50,
    "seed": None,

    # ===== Window =====
    "surface_width": 480,
    "surface_height": 240,
    "pixel_scale": 2,
    "target_fps": 60,
    "power_step": 5,
    "angle_step": 5,

    # ===== Remote control panel =====
    "server_enabled": True,
    "server_host": "0.0.0.0",
    "server_port": 8080,
}

def load_config(filepath: str) -> dict:
    """
    Overlays the settings in a JSON object file on DEFAULT_CONFIG.

    Falls back to the defaults when the file is missing, unreadable or not a
    JSON object. Keys the game does not know are kept but reported.
    """
    config = DEFAULT_CONFIG.copy()
    try:
        with open(filepath, 'r') as f:
            overrides = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"INFO: no usable config at '{filepath}' ({e.__class__.__name__}). Using defaults.")
        return config

    if not isinstance(overrides, dict):
        print(f"WARNING: '{filepath}' must hold a JSON object. Using defaults.")
        return config

    unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
    if unknown:
        print(f"WARNING: unknown config keys in '{filepath}': {', '.join(unknown)}")
    config.update(overrides)
    return config

# Load the configuration once when the module is imported
CONFIG = load_config(os.environ.get('PIXELGOLF_CONFIG', 'config.json'))
