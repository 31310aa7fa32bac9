from membership_dashboard.config.loader import (
    API_BASE_URL_ENV,
    load_config,
    load_config_or_default,
    plans_endpoint,
)
from membership_dashboard.config.models import DEFAULT_API_BASE_URL, DashboardConfig

__all__ = [
    "API_BASE_URL_ENV",
    "DEFAULT_API_BASE_URL",
    "DashboardConfig",
    "load_config",
    "load_config_or_default",
    "plans_endpoint",
]
