"""Figma API - Team and Project Methods.

Methods for listing team projects and project files.
"""
from .client import FigmaConfig, figma_get


async def figma_get_team_projects(config: FigmaConfig, team_id: str) -> list[dict]:
    """Get projects in a team.
    
    Args:
        config: Client configuration
        team_id: Team ID
    
    Returns:
        List of projects ({id, name}), empty if the response has none
    """
    data = await figma_get(config, f"{config.api_base}/teams/{team_id}/projects")
    return data.get("projects") or []


async def figma_get_project_files(config: FigmaConfig, project_id: str) -> list[dict]:
    """Get files in a project.
    
    Args:
        config: Client configuration
        project_id: Project ID
    
    Returns:
        List of files ({key, name, last_modified, thumbnail_url}),
        empty if the response has none
    """
    data = await figma_get(config, f"{config.api_base}/projects/{project_id}/files")
    return data.get("files") or []
