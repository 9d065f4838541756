"""Configuration loader for gridsquare defaults."""

import logging
import yaml
from pathlib import Path
from typing import Any

from .errors import InvalidGridLength
from .geo_utils import EARTH_RADIUS_KM
from .locator import PRECISIONS, decode_locator

logger = logging.getLogger(__name__)

UNITS = ("km", "mi")

DEFAULT_CONFIG = {
    "home_grid": "FM18lv",  # Reference grid for distance/bearing lookups
    "precision": 6,          # Grid length produced by default
    "earth_radius_km": EARTH_RADIUS_KM,
    "units": "km",
}


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML file with defaults.

    Searches for config in:
    1. Provided path
    2. local/config/config.yaml (user config, gitignored)
    3. ~/.config/gridsquare/config.yaml (XDG standard)
    4. Falls back to defaults

    Args:
        config_path: Optional path to config file

    Returns:
        Dict with configuration values
    """
    config = DEFAULT_CONFIG.copy()

    search_paths = []

    if config_path:
        search_paths.append(config_path)

    # Local config (gitignored, stays with repo)
    repo_root = Path(__file__).parent.parent
    search_paths.append(repo_root / "local" / "config" / "config.yaml")

    # XDG config
    search_paths.append(Path.home() / ".config" / "gridsquare" / "config.yaml")

    # Load first readable config
    for path in search_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    user_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Could not load config from %s: %s", path, e)
                continue
            if user_config is not None and not isinstance(user_config, dict):
                logger.warning("Could not load config from %s: expected a mapping, got %s",
                               path, type(user_config).__name__)
                continue
            if user_config:
                config.update(user_config)
            return config

    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration dict to save
        config_path: Optional path to save to (defaults to local/config/config.yaml)
    """
    if config_path is None:
        repo_root = Path(__file__).parent.parent
        config_path = repo_root / "local" / "config" / "config.yaml"

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def validate_config(config: dict[str, Any]) -> dict[str, Any]:
    """Check config values and canonicalize the home grid.

    Returns:
        Copy of config with home_grid in canonical case

    Raises:
        InvalidGrid, InvalidGridLength: bad home_grid or precision
        ValueError: bad earth_radius_km or units
    """
    checked = dict(config)
    checked["home_grid"] = decode_locator(str(config["home_grid"])).locator

    if config["precision"] not in PRECISIONS:
        raise InvalidGridLength(config["precision"])

    radius = config["earth_radius_km"]
    if not isinstance(radius, (int, float)) or radius <= 0:
        raise ValueError(f"earth_radius_km must be a positive number, got {radius!r}")

    if config["units"] not in UNITS:
        raise ValueError(f"units must be one of {', '.join(UNITS)}, got {config['units']!r}")

    return checked
