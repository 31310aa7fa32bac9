import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from membership_dashboard.config.models import DashboardConfig

API_BASE_URL_ENV = "DASHBOARD_API_BASE_URL"


def _extract_yaml(content: str) -> str:
    # Config may live inside a ```yaml fence in a markdown file
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def _apply_env(data: dict, environ: Mapping[str, str]) -> dict:
    base_url = environ.get(API_BASE_URL_ENV)
    if base_url:
        api = dict(data.get("api") or {})
        api["base_url"] = base_url
        data = {**data, "api": api}
    return data


def load_config(path: Path, environ: Mapping[str, str] | None = None) -> DashboardConfig:
    """
    Load and validate the dashboard config file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in config file: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}")

    data = _apply_env(data, os.environ if environ is None else environ)

    try:
        return DashboardConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e


def load_config_or_default(path: Path, environ: Mapping[str, str] | None = None) -> DashboardConfig:
    """Load the config file, falling back to defaults when it does not exist."""
    if not path.exists():
        env = os.environ if environ is None else environ
        return DashboardConfig.model_validate(_apply_env({}, env))
    return load_config(path, environ)


def plans_endpoint(config: DashboardConfig) -> str:
    """Full URL of the membership plans endpoint."""
    return f"{config.api.base_url}/{config.api.plans_path.lstrip('/')}"
