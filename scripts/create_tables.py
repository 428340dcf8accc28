"""Script to create repository tables and install the default element sets."""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.infrastructure.app_factory import install_element_sets  # noqa: E402
from src.infrastructure.database.session import create_tables  # noqa: E402
from src.infrastructure.logging import get_logger  # noqa: E402
from src.modules import models  # noqa: E402, F401

logger = get_logger(__name__)


async def main() -> None:
    """Create tables, then the Dublin Core and Scripto element sets."""
    logger.info("Creating repository tables...")

    try:
        await create_tables()
        await install_element_sets()
        logger.info("Repository tables and element sets are ready")
    except Exception as e:
        logger.error(f"Error preparing the repository: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
