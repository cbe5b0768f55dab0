import json
import logging
import os

from color_logic import InvalidColorFormat, hex_to_rgb
from color_sync import DEFAULT_HEX

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"

DEFAULT_SETTINGS = {
    "default_hex": DEFAULT_HEX,
    "always_on_top": False,
}


def load_settings(path=SETTINGS_FILE):
    """
    Read the settings file over the defaults. A missing or unreadable file
    yields the defaults; so does a bad start color.
    """
    settings = dict(DEFAULT_SETTINGS)
    if os.path.exists(path):
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read settings from %s: %s", path, e)
        else:
            if isinstance(data, dict):
                settings.update(data)
            else:
                logger.warning("Ignoring settings in %s: expected an object", path)

    try:
        hex_to_rgb(settings["default_hex"])
    except InvalidColorFormat:
        logger.warning("Bad default_hex %r, using %s", settings["default_hex"], DEFAULT_HEX)
        settings["default_hex"] = DEFAULT_HEX

    return settings


def save_settings(settings, path=SETTINGS_FILE):
    try:
        with open(path, 'w') as f:
            json.dump(settings, f, indent=2)
    except OSError as e:
        logger.warning("Could not save settings to %s: %s", path, e)
        return False
    logger.info("Saved settings to %s", path)
    return True
