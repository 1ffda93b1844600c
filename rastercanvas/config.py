"""Canvas configuration.

Drawing constants are grouped in pydantic models whose defaults reproduce
the reference output exactly. A TOML file can override them:

    # rastercanvas.toml
    [spiral]
    initial_length = 5.0
    rotation_step = 0.03
    decay = 0.999
    iterations = 10000

Resolution order for load_config(): RASTERCANVAS_CONFIG environment
variable, explicit path, ./rastercanvas.toml, ~/rastercanvas.toml.
"""

from __future__ import annotations

import logging
import os
from typing import Any, cast

from pydantic import BaseModel, Field

# TOML loading for Python 3.11+ and older
try:
    import tomllib  # type: ignore[import-not-found, unused-ignore]
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found, no-redef, unused-ignore]

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RASTERCANVAS_CONFIG"
CONFIG_FILENAME = "rastercanvas.toml"


class SpiralConfig(BaseModel):
    """Parameters of the draw_spiral simulation.

    Attributes:
        initial_length: Length of the first segment (direction starts at (0, initial_length))
        rotation_step: Radians the direction turns after each segment
        decay: Factor the direction is scaled by after each segment
        iterations: Number of segments drawn
    """

    model_config = {"frozen": True}

    initial_length: float = Field(default=5.0)
    rotation_step: float = Field(default=0.03)
    decay: float = Field(default=0.999, gt=0.0)
    iterations: int = Field(default=10000, ge=0)


class CanvasConfig(BaseModel):
    """Top-level configuration attached to a Canvas."""

    model_config = {"frozen": True}

    spiral: SpiralConfig = Field(default_factory=SpiralConfig)


def _resolve_config_path(config_path: str | None) -> str | None:
    """Resolve configuration path from env, explicit path, or defaults."""
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return env_config
    if config_path:
        return config_path
    candidates = [
        CONFIG_FILENAME,
        os.path.expanduser(f"~/{CONFIG_FILENAME}"),
    ]
    for candidate in candidates:
        if os.path.exists(candidate):
            return candidate
    return None


def load_config(config_path: str | None = None) -> CanvasConfig:
    """Load CanvasConfig from TOML, falling back to defaults.

    Args:
        config_path: Path to rastercanvas.toml (auto-detected if None)

    Returns:
        Parsed configuration; defaults when auto-detection finds no file

    Raises:
        FileNotFoundError: If an explicitly named file (argument or
            RASTERCANVAS_CONFIG) does not exist
        ValueError: If the file contains invalid values
    """
    resolved_path = _resolve_config_path(config_path)
    if resolved_path is None:
        logger.debug("No %s found, using default canvas config", CONFIG_FILENAME)
        return CanvasConfig()
    if not os.path.exists(resolved_path):
        raise FileNotFoundError(
            f"Config file not found at {resolved_path}. "
            f"Set {CONFIG_ENV_VAR} or create {CONFIG_FILENAME}"
        )
    with open(resolved_path, "rb") as f:
        data = cast(dict[str, Any], tomllib.load(f))
    logger.debug("Loaded canvas config from %s", resolved_path)
    return CanvasConfig.model_validate(data)
