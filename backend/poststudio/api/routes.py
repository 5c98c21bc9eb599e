from fastapi import APIRouter
from .v1 import adapted_posts, custom_tones, drafts, extension, generation, saved_posts

api_router = APIRouter(prefix="/api", tags=["post-studio"])

api_router.include_router(generation.router, prefix="/v1", tags=["generation"])
api_router.include_router(custom_tones.router, prefix="/v1", tags=["custom-tones"])
api_router.include_router(saved_posts.router, prefix="/v1", tags=["saved-posts"])
api_router.include_router(adapted_posts.router, prefix="/v1", tags=["adapted-posts"])
api_router.include_router(drafts.router, prefix="/v1", tags=["drafts"])
api_router.include_router(extension.router, prefix="/v1", tags=["extension"])

@api_router.get("/")
def read_root():
    return {"message": "LinkedIn Post Generator API"}
