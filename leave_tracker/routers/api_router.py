from fastapi import APIRouter
from leave_tracker.routers import branches, employees, public_holidays, leaves

# Centralized API router hub
# Routers are aggregated here, and main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(branches.router, tags=["Branches"])
api_router.include_router(employees.router, tags=["Employees"])
api_router.include_router(public_holidays.router, tags=["Public Holidays"])
api_router.include_router(leaves.router, tags=["Leave"])
