# admin_dashboard/api/v1/api.py

from fastapi import APIRouter

from admin_dashboard.api.v1.endpoints import events, pages, tickets, waitlist

api_router = APIRouter()

api_router.include_router(waitlist.router)
api_router.include_router(events.router)
api_router.include_router(tickets.router)
api_router.include_router(pages.router)
