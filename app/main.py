import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

load_dotenv()

from app.config import get_settings
from app.dependencies import build_analysis_requester
from app.errors import ResumeAnalysisError

# Import routers
from app.routers import analysis, resume

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.analysis_requester = build_analysis_requester(get_settings())
    yield
    app.state.analysis_requester = None


app = FastAPI(
    title=settings.app_name,
    description="FastAPI backend to extract resume text and analyze it against job descriptions.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ResumeAnalysisError)
async def resume_analysis_error_handler(request: Request, exc: ResumeAnalysisError):
    logger.warning(
        "%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.detail
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


app.include_router(resume.router, prefix="/api", tags=["Resume Upload"])
app.include_router(analysis.router, prefix="/api", tags=["Resume Analysis"])


@app.get("/")
async def root():
    return {"message": "Resume Match API is running. Use endpoints under /api/"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


# ✅ Local development runner
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="127.0.0.1", port=5030, reload=True)
