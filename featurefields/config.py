# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file.
#   Provides typed config objects to the field builder, the
#   statistics helpers and the collection assembler.
#
# CLASSES:
# --------
# - TemplateConfig (dataclass)
#     templates_dir: str        (default: packaged templates/ directory)
#
# - FieldDefaultsConfig (dataclass)
#     string_length: int        (default 128)
#     date_length: int          (default 36)
#     stat_string_length: int   (default 254)
#
# - AppConfig (dataclass)
#     templates: TemplateConfig
#     defaults: FieldDefaultsConfig
#     warn_on_discrepancies: bool  (default True)
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the singleton so the next get_config() re-reads the environment.
#
# USAGE:
# ------
#   from featurefields.config import get_config
#   config = get_config()
#   print(config.templates.templates_dir)
#   print(config.defaults.string_length)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


PACKAGED_TEMPLATES_DIR = str(Path(__file__).parent / "templates")

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class TemplateConfig:
    """Location of the JSON base objects."""
    templates_dir: str = PACKAGED_TEMPLATES_DIR


@dataclass
class FieldDefaultsConfig:
    """Default lengths applied when a field declares none."""
    string_length: int = 128
    date_length: int = 36
    stat_string_length: int = 254


@dataclass
class AppConfig:
    """Main application configuration."""
    templates: TemplateConfig = field(default_factory=TemplateConfig)
    defaults: FieldDefaultsConfig = field(default_factory=FieldDefaultsConfig)
    warn_on_discrepancies: bool = True


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    template_config = TemplateConfig(
        templates_dir=os.getenv("FEATUREFIELDS_TEMPLATES_DIR", PACKAGED_TEMPLATES_DIR)
    )

    defaults_config = FieldDefaultsConfig(
        string_length=int(os.getenv("FEATUREFIELDS_STRING_LENGTH", "128")),
        date_length=int(os.getenv("FEATUREFIELDS_DATE_LENGTH", "36")),
        stat_string_length=int(os.getenv("FEATUREFIELDS_STAT_STRING_LENGTH", "254"))
    )

    warn_flag = os.getenv("FEATUREFIELDS_WARN_ON_DISCREPANCIES", "true")

    _config_instance = AppConfig(
        templates=template_config,
        defaults=defaults_config,
        warn_on_discrepancies=warn_flag.strip().lower() in _TRUE_VALUES
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config_instance
    _config_instance = None
