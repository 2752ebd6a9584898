from fastapi import APIRouter
from app.api.v1.endpoints import trips, expenses, ledger, share

api_router = APIRouter()

api_router.include_router(trips.router, prefix="/trips", tags=["trips"])
api_router.include_router(expenses.router, prefix="/trips", tags=["expenses"])
api_router.include_router(ledger.router, prefix="/trips", tags=["ledger"])
api_router.include_router(share.router, tags=["share"])
