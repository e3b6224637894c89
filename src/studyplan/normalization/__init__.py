"""Input normalization."""

from .config_resolver import (
    DEFAULT_PLAN_CONFIG,
    PLAN_SETTING_MAXIMUMS,
    coerce_plan_setting,
    coerce_positive_number,
    resolve_effective_config,
)
from .request import normalize_request

__all__ = [
    "DEFAULT_PLAN_CONFIG",
    "PLAN_SETTING_MAXIMUMS",
    "coerce_plan_setting",
    "coerce_positive_number",
    "normalize_request",
    "resolve_effective_config",
]
