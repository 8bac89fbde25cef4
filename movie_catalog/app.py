from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.infrastructure.config.dependencies import get_api_settings, get_settings
from movie_catalog.infrastructure.logging.logger import Logger, setup_logging
from movie_catalog.infrastructure.persistence.database import create_tables, dispose_engine, get_engine
from movie_catalog.presentation.routers import movies

setup_logging()

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    engine = get_engine()
    if settings.CREATE_TABLES_ON_STARTUP:
        logger.info("Creating database tables")
        await create_tables(engine)
    try:
        yield
    finally:
        await dispose_engine()


api_settings = get_api_settings()

app = FastAPI(title=api_settings.title, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=api_settings.cors_origins,
    allow_credentials=api_settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Movie catalog is running"}
