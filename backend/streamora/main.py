"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from streamora.core.config import settings
from streamora.core.logging import setup_logging
from streamora.core.middleware import CorrelationIdMiddleware, RequestLoggingMiddleware
from streamora.modules.creator.router import router as creator_router
from streamora.modules.identity.router import router as identity_router
from streamora.modules.moderation.router import router as moderation_router
from streamora.modules.monetization.router import router as monetization_router
from streamora.modules.notification.router import router as notification_router
from streamora.modules.site.router import router as site_router
from streamora.modules.video.router import router as video_router

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
## Streamora Creator API

Creator monetization and moderation for the Streamora video platform.

### Features

* **Identity** - Registration, sign in and the admin account
* **Monetization** - Eligibility, review requests, activation, ad rates and payouts
* **Moderation** - Escalating strikes up to channel suspension
* **Notifications** - Per-creator and broadcast inbox messages
* **Videos** - Uploads, embeds, feeds and search
* **Site** - Channel subscriptions and site-wide theme events
    """,
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    openapi_tags=[
        {"name": "health", "description": "Health check endpoints"},
        {"name": "identity", "description": "Registration, login and session"},
        {"name": "creators", "description": "Creator stats"},
        {"name": "monetization", "description": "Monetization lifecycle, rates and payouts"},
        {"name": "moderation", "description": "Strikes and channel suspension"},
        {"name": "notifications", "description": "Inbox and admin messages"},
        {"name": "videos", "description": "Video publishing, feeds and interactions"},
        {"name": "site", "description": "Subscriptions and site events"},
    ],
)

setup_logging(
    level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
    json_format=settings.LOG_JSON,
    include_stack_trace=True,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CorrelationIdMiddleware)


@app.get("/health", tags=["health"])
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(identity_router, prefix=settings.API_V1_PREFIX)
app.include_router(creator_router, prefix=settings.API_V1_PREFIX)
app.include_router(monetization_router, prefix=settings.API_V1_PREFIX)
app.include_router(moderation_router, prefix=settings.API_V1_PREFIX)
app.include_router(notification_router, prefix=settings.API_V1_PREFIX)
app.include_router(video_router, prefix=settings.API_V1_PREFIX)
app.include_router(site_router, prefix=settings.API_V1_PREFIX)
