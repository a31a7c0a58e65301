"""Sync configuration resolved from environment variables."""
import os
from typing import Mapping, Optional
from dataclasses import dataclass, field

from .client import FIGMA_API_BASE, FigmaConfig


DEFAULT_OUTPUT_PATH = "design-index.json"


class ConfigError(ValueError):
    """Missing or incomplete sync configuration."""


@dataclass
class SyncConfig:
    """Everything one sync run needs, built once at startup."""
    figma: FigmaConfig
    team_id: str = ""
    project_ids: list[str] = field(default_factory=list)
    output_path: str = DEFAULT_OUTPUT_PATH
    project_name_allowlist: list[str] = field(default_factory=list)


def split_csv(value: Optional[str]) -> list[str]:
    """Split a comma-separated value, trimming items and dropping empty ones."""
    return [item.strip() for item in (value or "").split(",") if item.strip()]


def load_config(environ: Optional[Mapping[str, str]] = None) -> SyncConfig:
    """Build a SyncConfig from environment variables.
    
    Either FIGMA_TEAM_ID or FIGMA_PROJECT_IDS must be set. When both are
    set the explicit project IDs win.
    
    Args:
        environ: Variables to read (defaults to os.environ)
    
    Returns:
        Validated sync configuration
    
    Raises:
        ConfigError: Token missing, or no team/project selection
    """
    env = os.environ if environ is None else environ
    
    token = env.get("FIGMA_TOKEN") or env.get("FIGMA_API_KEY")
    team_id = (env.get("FIGMA_TEAM_ID") or "").strip()
    project_ids = split_csv(env.get("FIGMA_PROJECT_IDS"))
    
    if not token:
        raise ConfigError("Missing FIGMA_TOKEN env var")
    if not team_id and not project_ids:
        raise ConfigError("Provide FIGMA_TEAM_ID or FIGMA_PROJECT_IDS (comma-separated)")
    
    return SyncConfig(
        figma=FigmaConfig(
            api_key=token,
            api_base=(env.get("FIGMA_API_BASE") or FIGMA_API_BASE).rstrip("/"),
        ),
        team_id=team_id,
        project_ids=project_ids,
        output_path=env.get("OUTPUT_PATH") or DEFAULT_OUTPUT_PATH,
        project_name_allowlist=split_csv(env.get("PROJECT_NAME_ALLOWLIST")),
    )
