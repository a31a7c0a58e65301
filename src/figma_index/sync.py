"""Figma -> design index sync.

Fetches projects and their files, normalizes, sorts and writes the index.
READ-ONLY on the Figma side.
"""
from dataclasses import dataclass

from loguru import logger

from .config import SyncConfig
from .entries import DesignEntry, to_entry
from .projects import resolve_projects
from .sorting import sort_entries
from .teams import figma_get_project_files
from .writer import write_index


@dataclass
class SyncResult:
    """Outcome of one sync run."""
    count: int
    output_path: str


async def collect_entries(config: SyncConfig, projects: list[dict]) -> list[DesignEntry]:
    """Fetch each project's files in order and normalize them.
    
    Projects are fetched one at a time; the first failure aborts the rest.
    """
    entries: list[DesignEntry] = []
    for project in projects:
        files = await figma_get_project_files(config.figma, project["id"])
        logger.info(f"Project {project.get('name')!r}: {len(files)} file(s)")
        for file in files:
            entries.append(to_entry(file, project.get("name")))
    return entries


async def run_sync(config: SyncConfig) -> SyncResult:
    """Run one full sync and write the index.
    
    Nothing is written unless every project was fetched successfully.
    
    Args:
        config: Sync configuration
    
    Returns:
        Number of entries written and the configured output path
    """
    projects = await resolve_projects(config)
    entries = await collect_entries(config, projects)
    count = write_index(sort_entries(entries), config.output_path)
    return SyncResult(count=count, output_path=config.output_path)
