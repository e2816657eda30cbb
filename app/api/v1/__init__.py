# app/api/v1/__init__.py

from fastapi import APIRouter
from . import persons, follows, system

api_router = APIRouter()

api_router.include_router(persons.router, prefix="/persons", tags=["인물"])
api_router.include_router(follows.router, prefix="/follows", tags=["팔로우"])
api_router.include_router(system.router, prefix="/system", tags=["시스템"])
