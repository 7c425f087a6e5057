import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import settings
from app.core.exceptions import AppError
from app.core.locale import LocaleMiddleware
from app.core.rate_limit import limiter
from app.core.sanitize import configure_sanitizer
from app.modules.admins import routes as admins_routes
from app.modules.auth import routes as auth_routes
from app.modules.company import routes as company_routes
from app.modules.facilities import routes as facilities_routes
from app.modules.history import routes as history_routes
from app.modules.history_document import routes as history_document_routes
from app.modules.home import routes as home_routes
from app.modules.inquiries import routes as inquiries_routes
from app.modules.notice_categories import routes as notice_categories_routes
from app.modules.notices import routes as notices_routes
from app.modules.partners import routes as partners_routes
from app.modules.product_categories import routes as product_categories_routes
from app.modules.products import routes as products_routes
from app.modules.site import routes as site_routes
from app.modules.system import routes as system_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    return JSONResponse(status_code=500, content={"detail": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"] = list(message["headers"]) + [
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"Referrer-Policy", b"strict-origin-when-cross-origin"),
                ]
            await send(message)

        await self.app(scope, receive, send_with_headers)


# Last added runs first: locale redirects happen before CORS and security headers
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(
    LocaleMiddleware,
    locales=settings.get_locales_list(),
    default_locale=settings.default_locale,
    cookie_name=settings.locale_cookie_name,
    detection=settings.locale_detection,
)

# Admin dashboard API
for admin_router in (
    notices_routes.router,
    notice_categories_routes.router,
    products_routes.router,
    product_categories_routes.router,
    partners_routes.router,
    facilities_routes.router,
    history_routes.router,
    company_routes.router,
    home_routes.router,
    admins_routes.router,
    system_routes.router,
):
    app.include_router(admin_router, prefix="/api/admin")

# Public API
app.include_router(auth_routes.router, prefix="/api")
app.include_router(inquiries_routes.router, prefix="/api")
app.include_router(history_document_routes.router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    configure_sanitizer(settings.sanitizer_backend)
    logger.info("Application startup (locales: %s, sanitizer: %s)", settings.locales, settings.sanitizer_backend)


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness probe"""
    return {"status": "ready"}


# Localized site pages match any /{locale}/... path, so they go last
app.include_router(site_routes.router)
