import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from web.backend.routers import reports

logger = logging.getLogger("kennel_report.api")


def create_app() -> FastAPI:
    app = FastAPI(title="Kennel Report API", version="1.0")

    raw_origins = os.getenv("KENNEL_REPORT_ALLOWED_ORIGINS", "*")
    allow_origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    allow_credentials = "*" not in allow_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "service": "Kennel Report"}

    app.include_router(reports.router, prefix="/api/v1/reports", tags=["reports"])
    logger.info("Report API ready (origins: %s)", ", ".join(allow_origins))

    return app


app = create_app()
