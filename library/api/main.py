# library/api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from library.database import Database
from library.api.routes import books

logger = logging.getLogger(__name__)

def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the API application around a database.

    Serve with: uvicorn --factory library.api.main:create_app

    Args:
        database: Database to serve; defaults to one built from DATABASE_URL
    """
    database = database or Database()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Initialize database on startup
        database.init_db()
        yield
        database.dispose()

    app = FastAPI(title="Library API", lifespan=lifespan)
    app.state.database = database
    app.include_router(books.router)

    @app.get("/")
    async def root():
        return {"message": "Library API"}

    return app
