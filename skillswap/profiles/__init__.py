from functools import lru_cache

from skillswap.core.config import settings

from .local_directory import LocalProfileDirectory
from .provider import ProfileProvider


@lru_cache(maxsize=1)
def get_default_profile_provider() -> ProfileProvider:
    return LocalProfileDirectory(settings.profile_directory_path)


__all__ = ["ProfileProvider", "LocalProfileDirectory", "get_default_profile_provider"]
