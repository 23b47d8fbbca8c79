from fastapi import APIRouter

from src.taskhub.api.v1 import auth, projects, tasks, teams

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(teams.router)
api_router.include_router(projects.router)
api_router.include_router(tasks.router)
