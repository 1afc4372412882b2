from fastapi import APIRouter, Depends

from skillswap.profiles import ProfileProvider, get_default_profile_provider

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report service status and profile directory size.")
async def health_check(directory: ProfileProvider = Depends(get_default_profile_provider)):
    posts = directory.list_posts()
    return {
        "status": "healthy",
        "profile_directory": {"loaded": bool(posts), "posts": len(posts)},
    }
