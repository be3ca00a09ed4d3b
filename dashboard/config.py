import copy
import logging
import os

import yaml

from domain.models import Needs

# Resolve the default config relative to the dashboard directory
_DASHBOARD_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_CONFIG_PATH = os.path.join(_DASHBOARD_DIR, "config.yaml")

DEFAULTS = {
    "calendar": {"week_count": 4},
    "projection": {"needs": {"carte_sim": False, "ordinateur_voyage": False}},
    "display": {"date_format": "%d/%m"},
    "logging": {"level": "INFO"},
}

logger = logging.getLogger(__name__)


def _merge(base: dict, override: dict) -> dict:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | None = None) -> dict:
    """Load the YAML config and merge it over the defaults.

    The path is resolved from *path*, then ``TRAVEL_CONFIG``, then the
    bundled ``config.yaml``. A missing bundled file falls back to defaults;
    a missing explicit file raises FileNotFoundError.
    """
    config_path = path or os.environ.get("TRAVEL_CONFIG")
    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return copy.deepcopy(DEFAULTS)
        config_path = DEFAULT_CONFIG_PATH

    with open(config_path, encoding="utf-8") as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{config_path}: la configuration doit être un mapping YAML")
    logger.debug("Configuration chargée depuis %s", config_path)
    return _merge(DEFAULTS, loaded)


def needs_policy(config: dict) -> Needs:
    needs = config["projection"]["needs"]
    return Needs(
        carte_sim=bool(needs.get("carte_sim", False)),
        ordinateur_voyage=bool(needs.get("ordinateur_voyage", False)),
    )


def configure_logging(config: dict) -> None:
    level = str(config["logging"]["level"]).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
