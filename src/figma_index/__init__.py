"""Figma design index sync.

Builds a sorted JSON index of every file in a Figma team or set of projects.
"""

# Client
from .client import (
    figma_get,
    FigmaConfig,
    FigmaApiError,
    FIGMA_API_BASE,
)

# Configuration
from .config import (
    load_config,
    split_csv,
    SyncConfig,
    ConfigError,
    DEFAULT_OUTPUT_PATH,
)

# Team and project methods
from .teams import (
    figma_get_team_projects,
    figma_get_project_files,
)

# Pipeline steps
from .projects import resolve_projects, projects_from_ids, filter_by_name
from .entries import DesignEntry, to_entry, figma_design_url
from .sorting import sort_entries, parse_timestamp, title_key
from .writer import write_index, render_index
from .sync import run_sync, collect_entries, SyncResult


__all__ = [
    # Client
    "figma_get",
    "FigmaConfig",
    "FigmaApiError",
    "FIGMA_API_BASE",
    # Configuration
    "load_config",
    "split_csv",
    "SyncConfig",
    "ConfigError",
    "DEFAULT_OUTPUT_PATH",
    # Teams
    "figma_get_team_projects",
    "figma_get_project_files",
    # Pipeline
    "resolve_projects",
    "projects_from_ids",
    "filter_by_name",
    "DesignEntry",
    "to_entry",
    "figma_design_url",
    "sort_entries",
    "parse_timestamp",
    "title_key",
    "write_index",
    "render_index",
    "run_sync",
    "collect_entries",
    "SyncResult",
]
