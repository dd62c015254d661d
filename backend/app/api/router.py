from fastapi import APIRouter

from app.api.v1 import departments, employee_history, employees, health


api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(departments.router, prefix="/departments", tags=["departments"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(employee_history.router, prefix="/employees", tags=["employees"])
