from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from config import settings
from routers import health, countries, language, recommendations, chat
from utils.logging_config import setup_logging

logger = setup_logging()

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

app = FastAPI(title="Tourism Guide", version="0.1.0")

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)
app.include_router(language.router)
app.include_router(recommendations.router)
app.include_router(chat.router)


@app.get("/")
async def root():
    return {
        "name": "Tourism Guide API",
        "version": "0.1.0",
        "endpoints": ["/health", "/countries", "/language", "/recommendations", "/chat"],
    }


@app.on_event("startup")
async def startup():
    logger.info("Tourism guide API is running (recommender: %s)", settings.recommender_backend)


@app.on_event("shutdown")
async def shutdown():
    from utils.llm_client import close_client
    await close_client()
