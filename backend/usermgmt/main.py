import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from usermgmt.database import init_db
from usermgmt.routes import users

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

APP_NAME = "User Management API"

app = FastAPI(title=APP_NAME)

_cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
_extra = os.getenv("CORS_ORIGINS", "")
if _extra:
    _cors_origins.extend(o.strip() for o in _extra.split(",") if o.strip())

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router, prefix="/api", tags=["users"])


@app.on_event("startup")
def on_startup():
    init_db()

    for r in app.routes:
        methods = getattr(r, "methods", None)
        path = getattr(r, "path", None)
        if path:
            methods_str = ", ".join(sorted(methods)) if methods else "N/A"
            logger.debug(f"{methods_str:20} {path}")
    logger.info(f"{APP_NAME} started with {len(app.routes)} routes")


@app.get("/api/health")
def health_check():
    return {"app_name": APP_NAME, "status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "usermgmt.main:app",
        host=os.getenv("API_HOST", "localhost"),
        port=int(os.getenv("API_PORT", "8000")),
        reload=True,
    )
