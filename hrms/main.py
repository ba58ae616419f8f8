# hrms/main.py
import logging
from typing import Optional
from fastapi import FastAPI
from contextlib import asynccontextmanager
from hrms.routes import employee_router, health_router
from hrms.database import Database, connect_to_mongo, close_mongo_connection
from hrms.errors import register_error_handlers
from hrms.config import Settings, get_settings

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application.

    When ``database`` is given it is used as is and left open on shutdown;
    otherwise a connection is made at startup and a failure aborts it.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        owned = app.state.database is None
        if owned:
            app.state.database = await connect_to_mongo(settings)
        yield
        # Shutdown
        if owned:
            await close_mongo_connection(app.state.database)
            app.state.database = None

    app = FastAPI(title="HRMS", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database

    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(employee_router, tags=["employees"])
    return app

app = create_app()

def run():
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "hrms.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL,
    )

if __name__ == "__main__":
    run()
