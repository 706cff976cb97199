from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from typing import Dict
from app.core.config import settings

router = APIRouter(tags=["health"])

API_ENDPOINTS = [
    ("/api/auth/register", "Register a new user"),
    ("/api/auth/login", "Login a user"),
    ("/api/auth/me", "Get current user"),
    ("/api/events", "Get all events"),
    ("/api/events/{id}", "Get event by ID"),
    ("/api/questions/generate", "Generate questions"),
    ("/api/questions", "Save a question"),
    ("/api/questions/event/{eventId}", "Get questions for an event"),
]

STATUS_PAGE = """<html>
  <head>
    <title>EnTalk Questions Tool</title>
    <style>
      body {{ font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; line-height: 1.6; }}
      h1 {{ color: #1976d2; }}
      .container {{ border: 1px solid #ddd; border-radius: 5px; padding: 20px; margin-top: 20px; }}
    </style>
  </head>
  <body>
    <h1>EnTalk Questions Tool</h1>
    <div class="container">
      <h2>Welcome to EnTalk Questions Tool!</h2>
      <p>This is the API server for the EnTalk Questions Tool application.</p>
      <p>API endpoints available:</p>
      <ul>
{endpoints}
      </ul>
      <p>Status: Server is running</p>
      <p>Database Connection: {database}</p>
      <p>Environment: {environment}</p>
    </div>
  </body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def status_page(request: Request):
    """Human-readable landing page listing the API and the database state."""
    endpoints = "\n".join(
        f"        <li>{path} - {description}</li>" for path, description in API_ENDPOINTS
    )
    connected = getattr(request.app.state, "db_connected", False)
    return STATUS_PAGE.format(
        endpoints=endpoints,
        database="Connected" if connected else "Disconnected",
        environment=settings.ENVIRONMENT,
    )


@router.get("/health", response_model=Dict[str, str])
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        Dict with status indicating the service is running
    """
    return {"status": "ok", "message": "EnTalk Questions Tool API is running"}
