"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from libbook.api.routes import users, seats, bookings

api_router = APIRouter(prefix="/api")
api_router.include_router(users.router)
api_router.include_router(seats.router)
api_router.include_router(bookings.router)
