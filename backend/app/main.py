from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
import app.models
from app.database import engine, Base
from app.routers import auth, surveys, answers
from app.monitoring import REQUEST_COUNT, REQUEST_LATENCY
import logging
import os
import time

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

# Create tables if they don't exist yet
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Survey API")

# CORS middleware
origins = os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def record_request_metrics(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    # Label by route template so /surveys/1 and /surveys/2 share a series
    route = request.scope.get("route")
    endpoint = getattr(route, "path", request.url.path)
    REQUEST_LATENCY.labels(request.method, endpoint).observe(time.time() - start_time)
    REQUEST_COUNT.labels(request.method, endpoint, response.status_code).inc()
    return response

# Include routers
app.include_router(auth.router, prefix="/api")
app.include_router(surveys.router, prefix="/api")
app.include_router(answers.router, prefix="/api")

@app.get("/")
async def root():
    return {"message": "Welcome to the Survey API"}

@app.get("/api/health")
def health():
    return {"status": "ok"}

@app.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
