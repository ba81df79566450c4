import copy
import os

import yaml

CONFIG_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'config', 'ui.yaml')

DEFAULTS = {
    'general': {
        'map_size': [50, 50],
        'layer_count': 3,
        'tile_size': 64,
        'zoom_levels': [0.25, 0.5, 1.0, 2.0],
        'pan_speed': 16,
        'window_size': [1024, 720],
        'maps_dir': 'maps',
        'log_level': 'INFO',
    },
    'ui': {
        'background': '#323232',
        'grid_color': '#000000',
        'layer_colors': ['#8b4513', '#228b22', '#4682b4'],
        'solid_colors': ['#b22222', '#ff0000', '#8b0000'],
        'active_alpha': 180,
        'inactive_alpha': 80,
        'minimap_max_size': 200,
        'minimap_margin': 10,
        'minimap_background': '#ffffffe6',
        'viewport_color': '#0000ff',
        'status_bar_height': 24,
        'status_color': '#e0e0e0',
    },
}


def _merge(defaults: dict, loaded: dict) -> dict:
    merged = copy.deepcopy(defaults)
    for key, value in (loaded or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Load editor and UI settings from YAML, falling back to defaults."""

    def __init__(self, path: str = CONFIG_PATH):
        self.path = path
        with open(path, 'r') as f:
            self.data = _merge(DEFAULTS, yaml.safe_load(f))
        self.ui = self.data['ui']
        self.general = self.data['general']

    @property
    def map_size(self) -> tuple[int, int]:
        width, height = self.general['map_size']
        return int(width), int(height)

    @property
    def layer_count(self) -> int:
        return int(self.general['layer_count'])

    @property
    def tile_size(self) -> int:
        return int(self.general['tile_size'])
