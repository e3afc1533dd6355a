# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the FinnaCalc API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main        (or the `finnacalc` script)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    FinnaCalcException,
    finnacalc_exception_handler,
    validation_exception_handler,
)
from app.routers import calculators, chat, email, health, market

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs startup configuration. Provider clients are created per request,
    so there is nothing to open or close here.
    """
    logger.info(f"Starting FinnaCalc API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    for name, key in (
        ("ALPHA_VANTAGE_API_KEY", settings.ALPHA_VANTAGE_API_KEY),
        ("RESEND_API_KEY", settings.RESEND_API_KEY),
        ("OPENAI_API_KEY", settings.OPENAI_API_KEY),
    ):
        if not key:
            logger.warning(f"{name} is not set; dependent endpoints will return 500")

    yield

    logger.info("Shutting down FinnaCalc API")


# Create FastAPI application
app = FastAPI(
    title="FinnaCalc API",
    description="""
## Financial Calculators for Small Businesses and Individuals

FinnaCalc runs business, personal and tax calculators server-side and
proxies the third-party services behind the site.

### Endpoints

| Area | Path |
|------|------|
| **Calculators** | `POST /api/v1/calculators/{name}` |
| **Stocks** | `GET /api/stock`, `GET /api/stock-search`, `GET /api/top-movers` |
| **Early Access** | `POST /api/send-email` |
| **FinnaBot** | `POST /api/chat` |

### Quick Start

```bash
curl -X POST http://localhost:8000/api/v1/calculators/cash-flow \\
  -H "Content-Type: application/json" \\
  -d '{"monthly_revenue": "10000", "monthly_expenses": "8000", "starting_cash": "5000", "growth_rate": "5", "months": "3"}'
```

Errors always have the shape `{"error": "...", "code": "..."}`.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Calculators",
            "description": "Cash flow, business, personal and tax calculators",
        },
        {
            "name": "Market Data",
            "description": "Stock quotes, symbol search and top movers",
        },
        {
            "name": "Email",
            "description": "Early access signup",
        },
        {
            "name": "Chat",
            "description": "FinnaBot assistant",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(FinnaCalcException)
async def handle_finnacalc_exception(request: Request, exc: FinnaCalcException):
    """Handle custom FinnaCalc exceptions."""
    return await finnacalc_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {type(exc).__name__}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Calculator endpoints
app.include_router(
    calculators.router,
    prefix="/api/v1/calculators",
    tags=["Calculators"]
)

# Stock data proxy endpoints
app.include_router(
    market.router,
    prefix="/api",
    tags=["Market Data"]
)

# Early access email endpoint
app.include_router(
    email.router,
    prefix="/api",
    tags=["Email"]
)

# FinnaBot chat endpoint
app.include_router(
    chat.router,
    prefix="/api",
    tags=["Chat"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "FinnaCalc API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
        "calculators": "/api/v1/calculators",
    }


# =============================================================================
# Entry Point
# =============================================================================

def run() -> None:
    """Serve the API with uvicorn on API_HOST:API_PORT, reloading in development."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
