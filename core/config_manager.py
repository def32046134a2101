"""
Configuration Manager for Kennel Report.

Centralizes the thresholds of the report engine. Every empirical value is
declared here and can be overridden from config/runtime.yaml.

Usage:
    from core.config_manager import config
    minutes = config.GOOD_TRAINING_MINUTES
"""
import logging
from dataclasses import dataclass
from pathlib import Path

import yaml


CONFIG_DIR = Path(__file__).parent.parent / "config"
RUNTIME_CONFIG_PATH = CONFIG_DIR / "runtime.yaml"

logger = logging.getLogger("kennel_report.config")


@dataclass
class ReportConfig:
    """
    Report engine thresholds.

    Values mirror the rules trainers agreed on for daily reports.
    """

    # === Mood ===

    # Training minutes needed before a day can count as "good training"
    GOOD_TRAINING_MINUTES: int = 30

    # === Energy ===

    # Play minutes above which the dog is considered high energy
    HIGH_ENERGY_PLAY_MINUTES: int = 90

    # Rest minutes above which the dog is considered low energy
    LOW_ENERGY_REST_MINUTES: int = 180

    # === Highlights / areas ===

    # Training minutes that earn a duration highlight
    LONG_TRAINING_HIGHLIGHT_MINUTES: int = 60

    MAX_HIGHLIGHTS: int = 5
    MAX_AREAS_TO_IMPROVE: int = 3

    # Skill names listed before collapsing into "and N more skills"
    IMPROVED_SKILLS_SHOWN: int = 3
    DEVELOPING_SKILLS_SHOWN: int = 2
    SUMMARY_SKILLS_SHOWN: int = 4

    # === Tomorrow's focus (program progress, percent) ===

    FINAL_POLISH_PROGRESS: int = 75
    DISTRACTION_PROGRESS: int = 50


def _load_runtime_config() -> dict:
    """Load runtime overrides if the file exists."""
    if not RUNTIME_CONFIG_PATH.exists():
        return {}

    try:
        with open(RUNTIME_CONFIG_PATH, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Ignoring unreadable runtime config %s: %s", RUNTIME_CONFIG_PATH, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring runtime config %s: top level must be a mapping", RUNTIME_CONFIG_PATH)
        return {}
    return data


def get_config() -> ReportConfig:
    """
    Build the engine configuration.

    Priority: runtime.yaml > defaults

    Overrides whose type differs from the default (e.g. a quoted "3")
    are skipped with a warning.
    """
    base = ReportConfig()
    overrides = _load_runtime_config()

    for key, value in overrides.items():
        if not hasattr(base, key):
            logger.warning("Unknown config key in runtime.yaml: %s", key)
            continue
        expected = type(getattr(base, key))
        if type(value) is not expected:
            logger.warning(
                "Ignoring %s in runtime.yaml: expected %s, got %r",
                key, expected.__name__, value,
            )
            continue
        setattr(base, key, value)

    return base


# Module-level config instance
config = get_config()
