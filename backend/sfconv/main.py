from sfconv.core.log import setup_logging
from sfconv.core.settings import Settings
from sfconv.routers import geometries as geometries_router
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


setup_logging(Settings.LOG_LEVEL)

app = FastAPI(title='sfconv')

app.add_middleware(
    CORSMiddleware,
    allow_origins=Settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"], # Allows all methods
    allow_headers=["*"], # Allows all headers
)

app.include_router(geometries_router.api_router, prefix='/geometries', tags=['geometries'])
