import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from config import Config
from api.routes import router

config = Config.from_env()
os.makedirs(config.screenshot_dir, exist_ok=True)

app = FastAPI(
    title="Rental Listings Scraper API",
    description="Pararius and Funda rental listings with thumbnail screenshots",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")

app.mount(config.screenshot_url_prefix, StaticFiles(directory=config.screenshot_dir), name="screenshots")


@app.get("/health")
async def health_check():
    return {"status": "ok"}


def run() -> None:
    import uvicorn
    from main import setup_logging

    setup_logging(config)
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))

    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        log_level="info"
    )


if __name__ == "__main__":
    run()
