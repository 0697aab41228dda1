import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from app.api.routes import index
from app.api.routes import auth
from app.api.routes import user
from app.api.routes import settings as user_settings
from app.api.routes import logistics
from app.api.routes import tracking
from app.api.routes import work_order
from app.api.routes import production
from app.api.routes import dashboard
from app.api.routes import reports
from app.api.routes import notifications


from app.core.config import settings
from app.core.exceptions import FactoryOpsError
from app.core.logging import setup_logging

setup_logging()

app = FastAPI(title=settings.app_name)

# Middlewares
origins = []

if settings.allowed_hosts:
    origins = settings.allowed_hosts.split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error handling
@app.exception_handler(FactoryOpsError)
async def handle_factory_ops_error(request: Request, exc: FactoryOpsError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    fields = sorted({
        str(error["loc"][-1]) for error in exc.errors() if error.get("loc")
    })
    logger.warning(f"{request.method} {request.url.path} rejected: invalid {fields}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": f"Missing or invalid fields: {', '.join(fields)}"}
    )


# Register routes
app.include_router(index.router, prefix="/api", tags=["Health"])
app.include_router(auth.router, prefix="/api", tags=["Auth"])
app.include_router(user.router, prefix="/api", tags=["Users"])
app.include_router(user_settings.router,
                   prefix="/api/settings", tags=["Settings"])
app.include_router(logistics.router, prefix="/api", tags=["Logistics"])
app.include_router(tracking.router, prefix="/api", tags=["Tracking"])
app.include_router(work_order.router, prefix="/api", tags=["Work Orders"])
app.include_router(production.router, prefix="/api", tags=["Production"])
app.include_router(dashboard.router, prefix="/api", tags=["Dashboard"])
app.include_router(reports.router, prefix="/api", tags=["Reports"])
app.include_router(notifications.router,
                   prefix="/api/notifications", tags=["Notifications"])

# Static files serving
app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=None,
    )
