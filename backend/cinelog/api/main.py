from fastapi import APIRouter

from cinelog.api.routes import (
    local,
    login,
    reviews,
    utils,
    watchlist,
)

api_router = APIRouter()
api_router.include_router(login.router)
api_router.include_router(utils.router)
api_router.include_router(reviews.router)
api_router.include_router(watchlist.router)
api_router.include_router(local.router)
