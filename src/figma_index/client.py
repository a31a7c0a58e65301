"""Figma API Base Client.

Provides the async HTTP GET used by every sync step.
"""
import httpx
from typing import Optional
from dataclasses import dataclass

from loguru import logger


FIGMA_API_BASE = "https://api.figma.com/v1"


@dataclass
class FigmaConfig:
    """Configuration for Figma API client."""
    api_key: str
    api_base: str = FIGMA_API_BASE
    timeout: Optional[float] = None
    transport: Optional[httpx.AsyncBaseTransport] = None


class FigmaApiError(RuntimeError):
    """Non-2xx response from the Figma API."""

    def __init__(self, status_code: int, url: str, body: str):
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(f"Figma API error {status_code} for {url}: {body}")


async def figma_get(config: FigmaConfig, url: str) -> dict:
    """GET a Figma API URL and return the parsed JSON body.
    
    Args:
        config: Client configuration (token, timeout, transport)
        url: Absolute request URL
    
    Returns:
        Response JSON as dict
    
    Raises:
        FigmaApiError: The response status is not 2xx
    """
    logger.debug(f"GET {url}")
    async with httpx.AsyncClient(timeout=config.timeout, transport=config.transport) as client:
        response = await client.get(
            url,
            headers={"X-Figma-Token": config.api_key}
        )
        
        if not response.is_success:
            raise FigmaApiError(response.status_code, url, response.text)
        
        return response.json()
