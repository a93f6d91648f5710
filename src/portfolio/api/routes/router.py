from fastapi import APIRouter

from src.portfolio.api.routes import admin, auth, blog, contact, projects, site

api_router = APIRouter(prefix="/api")
api_router.include_router(projects.router)
api_router.include_router(blog.router)
api_router.include_router(contact.router)
api_router.include_router(auth.router)
api_router.include_router(admin.router)
api_router.include_router(site.router)
