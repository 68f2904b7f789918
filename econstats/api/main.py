"""FastAPI main application."""
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from econstats.api.routes import router
from econstats.config import API_HOST, API_PORT, DEBUG, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Indicator Statistics API",
    description="Descriptive statistics for economic indicator time series",
    version="0.1.0",
    debug=DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Indicator Statistics API"}


if __name__ == "__main__":
    uvicorn.run("econstats.api.main:app", host=API_HOST, port=API_PORT, reload=DEBUG)
