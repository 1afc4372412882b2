from contextlib import asynccontextmanager
import logging

from skillswap.profiles import get_default_profile_provider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    directory = get_default_profile_provider()
    logger.info("profile_directory_ready posts=%s", len(directory.list_posts()))
    yield
