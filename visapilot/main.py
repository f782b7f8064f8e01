from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from visapilot.config import settings
from visapilot.database import Database
from visapilot.core.errors import register_exception_handlers
from visapilot.core.logging import REQUEST_ID_HEADER, log_requests, logger
from visapilot.features.auth.router import router as auth_router
from visapilot.features.clients.router import router as clients_router
from visapilot.features.patients.router import router as patients_router
from visapilot.features.appointments.router import router as appointments_router
from visapilot.features.billing.router import invoices_router, payments_router
from visapilot.features.visa_applications.router import router as visa_applications_router
from visapilot.features.accounting.router import router as accounting_router
from visapilot.features.settings.router import router as settings_router, public_router as public_settings_router
from visapilot.features.profile.router import router as profile_router
from visapilot.features.knowledge.router import router as knowledge_router
from visapilot.features.notifications.router import router as notifications_router, templates_router as notification_templates_router
from visapilot.features.forms.router import router as forms_router
from visapilot.features.dashboard.router import router as dashboard_router, activity_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI application."""
    # Startup
    logger.info(f"Starting {settings.APP_NAME} API...")
    database = Database.from_settings(settings)
    await database.connect()
    app.state.database = database
    logger.info("Application started successfully")
    
    yield
    
    # Shutdown
    logger.info("Shutting down...")
    database.close()
    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Visa agency and clinic CRM API",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[REQUEST_ID_HEADER],
)

app.middleware("http")(log_requests)
register_exception_handlers(app)

# Register routers
for router in (
    auth_router,
    clients_router,
    patients_router,
    appointments_router,
    invoices_router,
    payments_router,
    visa_applications_router,
    accounting_router,
    settings_router,
    public_settings_router,
    profile_router,
    knowledge_router,
    notifications_router,
    notification_templates_router,
    forms_router,
    dashboard_router,
    activity_router,
):
    app.include_router(router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": f"Welcome to {settings.APP_NAME} API",
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
    }
