# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from surveyhub.app.core.config import settings
from surveyhub.app.core.errors import register_exception_handlers
from surveyhub.app.core.logging import get_logs_writer_logger
from surveyhub.db.session import engine
from surveyhub.db import Base
from surveyhub.db import models  # noqa: F401  (registers tables on Base.metadata)
from surveyhub.app.routers import auth, responses, surveys

logger = get_logs_writer_logger()

app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True, allow_methods=["*"], allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(surveys.router, prefix=settings.API_PREFIX)
app.include_router(responses.router, prefix=settings.API_PREFIX)
app.include_router(auth.router, prefix=settings.API_PREFIX)


@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("%s started (database: %s)", settings.APP_NAME, engine.url.render_as_string(hide_password=True))


@app.get("/health")
def health():
    return {"status": "ok"}
