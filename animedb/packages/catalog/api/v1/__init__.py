"""API v1 汇总路由：统一挂载所有版本化的子路由。"""

from fastapi import APIRouter

from animedb.packages.catalog.api.v1.endpoints import items, storages

api_router = APIRouter()
api_router.include_router(storages.router)
api_router.include_router(items.router)
