"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from usandours.api.routes import auth, couple, posts, timeline, events, items

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(couple.router)
api_router.include_router(posts.router)
api_router.include_router(timeline.router)
api_router.include_router(events.router)
api_router.include_router(items.router)
