"""Project enumeration: explicit IDs or every project in a team."""
from loguru import logger

from .config import SyncConfig
from .teams import figma_get_team_projects


def projects_from_ids(project_ids: list[str]) -> list[dict]:
    """Wrap explicit project IDs as projects.
    
    The real project name needs another API call, so the ID doubles as
    the name (and ends up in each entry's `_project`).
    """
    return [{"id": pid, "name": pid} for pid in project_ids]


def filter_by_name(projects: list[dict], allowlist: list[str]) -> list[dict]:
    """Keep projects whose name is exactly in the allowlist, in order."""
    if not allowlist:
        return projects
    allowed = set(allowlist)
    return [p for p in projects if p.get("name") in allowed]


async def resolve_projects(config: SyncConfig) -> list[dict]:
    """Resolve the projects to scan.
    
    Args:
        config: Sync configuration
    
    Returns:
        Projects ({id, name}) after the name allowlist is applied
    """
    if config.project_ids:
        projects = projects_from_ids(config.project_ids)
    else:
        projects = await figma_get_team_projects(config.figma, config.team_id)
    
    projects = filter_by_name(projects, config.project_name_allowlist)
    logger.info(f"Resolved {len(projects)} project(s)")
    return projects
