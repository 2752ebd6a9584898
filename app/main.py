from contextlib import asynccontextmanager

from fastapi import FastAPI
from app.core.config import settings
from app.core.logging import configure_logging
from app.db.mongo import connect_to_mongo, disconnect_from_mongo
from app.api.v1.api import api_router

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_to_mongo()
    try:
        yield
    finally:
        await disconnect_from_mongo()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.DESCRIPTION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

@app.get("/")
async def root():
    return {"message": "Welcome to Trip Split API"}

app.include_router(api_router, prefix=settings.API_V1_STR)
