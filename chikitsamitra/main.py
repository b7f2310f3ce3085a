from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from chikitsamitra.config.settings import settings
from chikitsamitra.config.redis_config import redis_config
from chikitsamitra.routes import appointment, chat, directory, selectors, verification
from chikitsamitra.services.booking_service import get_booking_workflow
from chikitsamitra.services.directory_service import get_directory_client
from chikitsamitra.services.speech_service import stt_service, tts_service

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger("chikitsamitra")


@asynccontextmanager
async def lifespan(app: FastAPI):
    redis_config.test_connection()
    if not tts_service.available:
        tts_service.notify_unavailable()
    yield
    await get_booking_workflow().drain_mirrors()
    redis_config.close()


app = FastAPI(
    title=settings.api_title,
    description="""
    ChikitsaMitra Health Assistant API

    Service layer behind the ChikitsaMitra page: hospital directory lookups,
    appointment booking and a keyword-based health chatbot.

    ### Features:
    * **Directory**: States, districts, hospitals, government schemes and medical FAQs
    * **Cascading Selectors**: State -> district -> hospital dropdowns over a WebSocket
    * **Appointment Booking**: Simulated phone verification, booking list and printable slips
    * **Chatbot**: Canned health advice, with optional speech input and output

    ### Business Rules:
    * Appointments can be booked from today up to **30 days** ahead
    * A phone number must be verified before a booking is accepted
    * Bookings are mirrored to the proxy server on a best-effort basis

    ### For Frontend Developers:
    * `/api/v1` endpoints return the consistent `success / data / error` envelope
    * `/api/*` directory endpoints return bare JSON lists
    * OpenAPI schema available at `/api/openapi.json`
    """,
    version=settings.api_version,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
    swagger_ui_parameters={
        "defaultModelsExpandDepth": -1,
        "docExpansion": "none",
        "filter": True
    }
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.debug(f"{request.method} {request.url.path} from {request.client}")
    response = await call_next(request)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    error = {
        "code": exc.status_code,
        "message": exc.detail,
        "type": type(exc).__name__
    }
    field = getattr(exc, "field", None)
    if field:
        error["field"] = field

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": error,
            "data": None
        }
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        errors.append({
            "field": " -> ".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"]
        })

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "success": False,
            "error": {
                "code": 422,
                "message": "Validation Error",
                "type": "ValidationError",
                "details": errors
            },
            "data": None
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": {
                "code": 500,
                "message": "Internal server error",
                "type": "InternalError"
            },
            "data": None
        }
    )


system_router = APIRouter(prefix="/api", tags=["System"])


@system_router.get("/")
def api_root():
    """Root API endpoint with information"""
    return {
        "success": True,
        "data": {
            "message": "ChikitsaMitra Health Assistant API",
            "version": settings.api_version,
            "documentation": {
                "swagger_ui": "/api/docs",
                "redoc": "/api/redoc",
                "openapi_schema": "/api/openapi.json"
            },
            "endpoints": {
                "states": "/api/states",
                "schemes": "/api/schemes",
                "faqs": "/api/faqs",
                "appointments": "/api/v1/appointments",
                "verification": "/api/v1/verification",
                "chat": "/api/v1/chat",
                "selectors": "/api/v1/selectors/{appointment|finder}"
            }
        }
    }


@system_router.get("/health")
def health_check():
    """Health check endpoint for monitoring"""
    return {
        "success": True,
        "data": {
            "status": "healthy",
            "service": "chikitsamitra-api",
            "version": settings.api_version,
            "directory_transport": settings.directory_transport,
            "mirrors_bookings": get_directory_client().mirrors_bookings,
            "speech": {
                "text_to_speech": tts_service.available,
                "speech_to_text": stt_service.available
            }
        }
    }


app.include_router(system_router)

app.include_router(directory.router, prefix="/api")
app.include_router(verification.router, prefix="/api/v1")
app.include_router(appointment.router, prefix="/api/v1")
app.include_router(chat.router, prefix="/api/v1")
app.include_router(selectors.router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "chikitsamitra.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level
    )
