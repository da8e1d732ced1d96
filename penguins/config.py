import json
import logging
from types import SimpleNamespace
from penguins.constants import *
from penguins.errors import ConfigError

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ('window_settings', 'asset_settings', 'render_settings', 'simulation_settings')

DEFAULTS = {
    'width': DEFAULT_WIDTH,
    'height': DEFAULT_HEIGHT,
    'fps': DEFAULT_FPS,
    'caption': DEFAULT_CAPTION,
    'asset_dir': DEFAULT_ASSET_DIR,
    'penguin_image': DEFAULT_PENGUIN_IMAGE,
    'hill_overlay_image': DEFAULT_HILL_OVERLAY_IMAGE,
    'allow_placeholders': True,
    'penguin_scale': PENGUIN_SCALE,
    'sky_color': SKY_COLOR,
    'seed': None,
    'total_frames': 600,
    'record_fps': 30,
    'output_dir': 'output',
    'video_id_prefix': 'penguins',
}


def load_config(path='config.json'):
    """
    Reads config.json and flattens its sections into a single namespace.
    Keys missing from the file fall back to DEFAULTS.
    """
    try:
        with open(path, 'r') as f:
            config_data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

    missing = [s for s in REQUIRED_SECTIONS if s not in config_data]
    if missing:
        raise ConfigError(f"Config file {path} is missing sections: {', '.join(missing)}")

    settings = dict(DEFAULTS)
    for section in REQUIRED_SECTIONS + ('recording_settings',):
        settings.update(config_data.get(section, {}))

    settings['sky_color'] = tuple(settings['sky_color'])
    config = SimpleNamespace(**settings)
    logger.debug("Loaded config from %s: %s", path, config)
    return config
