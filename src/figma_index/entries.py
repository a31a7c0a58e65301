"""Design index entries.

Maps raw Figma file records (as returned by /projects/{id}/files) into the
flat entry format consumed by the design index.
"""
from typing import Optional
from dataclasses import dataclass, field
from urllib.parse import quote


FIGMA_DESIGN_URL = "https://www.figma.com/design"
DEFAULT_TITLE = "Untitled"
ORG = "Redmond"
STATUS_ACTIVE = "active"

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
_URL_SAFE = "!~*'()"


@dataclass
class DesignEntry:
    """One file in the design index.
    
    brand_key, category, path, tags and thumb are reserved for a later
    enrichment pass and stay empty here.
    """
    id: str
    title: str
    figma_url: str
    updated_at: Optional[str] = None
    project: Optional[str] = None
    org: str = ORG
    brand_key: Optional[str] = None
    category: list[str] = field(default_factory=list)
    path: list[str] = field(default_factory=list)
    status: str = STATUS_ACTIVE
    tags: list[str] = field(default_factory=list)
    thumb: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialize with the index's key names and key order."""
        return {
            "id": self.id,
            "title": self.title,
            "org": self.org,
            "brandKey": self.brand_key,
            "category": list(self.category),
            "path": list(self.path),
            "status": self.status,
            "tags": list(self.tags),
            "thumb": self.thumb,
            "figmaUrl": self.figma_url,
            "updatedAt": self.updated_at,
            "_project": self.project,
        }


def figma_design_url(file_key: str, title: str) -> str:
    """Build the /design/ link for a file. Only the title is escaped."""
    return f"{FIGMA_DESIGN_URL}/{file_key}/{quote(title, safe=_URL_SAFE)}"


def to_entry(file: dict, project_name: Optional[str]) -> DesignEntry:
    """Normalize a raw Figma file record.
    
    Args:
        file: File record ({key, name, last_modified, thumbnail_url})
        project_name: Name of the owning project, if known
    
    Returns:
        DesignEntry for the file
    """
    file_key = file.get("key")
    title = file.get("name") or DEFAULT_TITLE
    
    return DesignEntry(
        id=file_key,
        title=title,
        figma_url=figma_design_url(file_key, title),
        updated_at=file.get("last_modified") or None,
        project=project_name or None,
    )
