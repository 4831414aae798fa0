"""
RASA NLU proxy

Entry point for the FastAPI application.
Logging is configured automatically by create_app() via logging_config.
"""
from app.core import create_app

# Create FastAPI application
app = create_app()


if __name__ == "__main__":
    import uvicorn
    from app.config.settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
    )
