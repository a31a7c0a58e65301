"""Command-line entry point for the Figma design index sync."""
import asyncio
import sys

from dotenv import load_dotenv
from loguru import logger

from .config import load_config
from .sync import run_sync


LOG_LEVEL = "INFO"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Replace loguru's default DEBUG sink with a stderr sink at `level`."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def main() -> int:
    """Sync the design index from Figma.
    
    Configuration comes from the environment (and a local .env file).
    
    Returns:
        Process exit status
    """
    load_dotenv()
    configure_logging()
    
    try:
        config = load_config()
        result = asyncio.run(run_sync(config))
    except Exception as e:
        logger.error(f"❌ {e}")
        return 1
    
    print(f"Wrote {result.count} entries to {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
