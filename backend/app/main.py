# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Your configuration and DB
from app.config import settings
from app.core.db import init_db, close_db
from app.core.errors import register_exception_handlers

from app.api.v1.routers import auth, potions

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

@app.on_event("startup")
async def on_startup():
    # One connection pool for the whole process, handed to services via app.state
    app.state.db = await init_db(generate_schemas=settings.generate_schemas)
    logger.info("[db] connected (env=%s)", settings.env)

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()
    logger.info("[db] connections closed")

# REST
app.include_router(auth.router)
app.include_router(potions.router)

@app.get("/healthz")
def healthz():
    return {"ok": True}

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
