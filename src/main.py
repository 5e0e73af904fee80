"""Main application entry point for the Prompt Structurer service."""

import os
import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from agents.exceptions import PromptStructurerError
from config.config import settings, get_logger
from src.routes import prompts_router, templates_router, system_router

# Set up structured logging
logger = get_logger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Prompt Structurer",
    description="Convert natural-language prompts into structured JSON and enhance them with Gemini",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(prompts_router)
app.include_router(templates_router)
app.include_router(system_router)


@app.exception_handler(PromptStructurerError)
async def prompt_structurer_error_handler(request: Request, exc: PromptStructurerError):
    """Map unhandled domain errors to a JSON 400/500 response."""
    status_code = 400 if exc.error_code == "VALIDATION_ERROR" else 500
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def main():
    """Main entry point for running the application."""
    logger.info("Starting Prompt Structurer...")
    logger.info(f"Server will run on {settings.host}:{settings.port}")

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
