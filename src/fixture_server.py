"""
Fixture Server
===============
FastAPI application exposing the JSON fixture generator over HTTP.

Run locally with:
    python fixture_server.py
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import config
from routers.generate import router as generate_router

# Logging Setup
logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s [%(levelname)s] %(message)s')
logger = logging.getLogger(config.LOGGER_NAME)

app = FastAPI(title="JSON Fixture Generator")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(generate_router)

logger.info(f"✅ Fixture server ready (max pattern attempts: {config.MAX_PATTERN_ATTEMPTS})")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
