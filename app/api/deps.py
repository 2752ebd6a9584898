from fastapi import Depends

from app.db.mongo import get_db
from app.repositories.trip_repo import TripRepository
from app.services.trip_service import TripService


def get_trip_repository(db = Depends(get_db)) -> TripRepository:
    return TripRepository(db)


def get_trip_service(repo: TripRepository = Depends(get_trip_repository)) -> TripService:
    return TripService(repo)
