"""
FastAPI server exposing the SF film locations API.
Endpoints:
- GET /movies?title=...: all location records, or those whose title contains `title`
- GET /movies/autocomplete?q=...: up to ten distinct titles starting with `q`

The dataset is fetched from the upstream open-data endpoint on every request.
Run: uvicorn api:app --reload
"""

# Import standard libraries for timing and record conversion
import time  # measure request latencies
from contextlib import asynccontextmanager  # lifespan hook
from dataclasses import asdict  # dataclass -> dict for response models
from typing import List, Optional  # precise typing for clarity

# Import httpx for the shared outbound client
import httpx  # async HTTP client

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import Depends, FastAPI, Query, Request  # FastAPI primitives
from fastapi.encoders import jsonable_encoder  # serialize validation errors
from fastapi.exceptions import RequestValidationError  # raised on missing/invalid params
from fastapi.responses import JSONResponse  # custom error responses
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for configuration, upstream access and queries
from sfmovies.config import configure_logging, settings  # runtime settings
from sfmovies.errors import UpstreamError, UpstreamUnreachable  # upstream failures
from sfmovies.search_service import MovieLocationService  # query service
from sfmovies.upstream_client import DatasetClient  # dataset fetcher

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger


# Lifespan hook: one pooled HTTP client for the whole process
@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Create the shared upstream HTTP client on startup and close it on shutdown."""
	configure_logging(settings.LOG_LEVEL)  # apply configured log level
	logger.info(f"[API] Startup: upstream dataset at {settings.DATASET_URL}")  # log target
	app.state.http_client = httpx.AsyncClient(timeout=settings.UPSTREAM_TIMEOUT_S)  # shared client
	try:
		yield
	finally:
		await app.state.http_client.aclose()  # release pooled connections
		logger.info("[API] Shutdown: upstream client closed")


# Instantiate the FastAPI application with metadata
app = FastAPI(title=settings.APP_NAME, version="1.0.0", lifespan=lifespan)  # web app


# Pydantic model that describes the shape of a single location record in responses
class MovieLocationOut(BaseModel):
	title: Optional[str] = None  # movie title
	release_year: Optional[str] = None  # release year as text
	locations: Optional[str] = None  # shooting location
	actor_1: Optional[str] = None  # first actor
	actor_2: Optional[str] = None  # second actor
	actor_3: Optional[str] = None  # third actor


# Dependency that wires the service to the shared client
def get_movie_service(request: Request) -> MovieLocationService:
	"""Build the query service on top of the application's HTTP client."""
	client = DatasetClient(request.app.state.http_client, settings.DATASET_URL)  # upstream client
	return MovieLocationService(client)  # service instance


# Map upstream failures to gateway errors
@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
	"""Unreachable upstream -> 503; bad status or malformed payload -> 502."""
	status_code = 503 if isinstance(exc, UpstreamUnreachable) else 502  # pick status
	logger.warning(f"[API] {request.url.path} failed: {type(exc).__name__}: {exc.message}")  # log failure
	return JSONResponse(status_code=status_code, content={"detail": exc.message})


# Missing or invalid query parameters are client errors
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
	"""Answer 400 instead of FastAPI's default 422."""
	logger.info(f"[API] {request.url.path} rejected: invalid request parameters")  # log rejection
	return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# List endpoint with optional title filter
@app.get("/movies", response_model=List[MovieLocationOut])
async def get_movies(
	title: Optional[str] = Query(None, description="Case-insensitive title substring"),
	service: MovieLocationService = Depends(get_movie_service),
):
	"""Return all records, or only those whose title contains `title`."""
	start = time.time()  # start timer
	logger.debug(f"[API] /movies title={title!r}")  # debug log of input

	# Absence selects the full list; an empty string still goes through the filter
	if title is None:
		records = await service.get_all()  # passthrough
	else:
		records = await service.filter_by_title(title)  # substring filter

	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /movies served {len(records)} records in {elapsed_ms:.2f} ms")  # summary
	return [MovieLocationOut(**asdict(r)) for r in records]  # convert to response schema


# Autocomplete endpoint over titles
@app.get("/movies/autocomplete", response_model=List[str])
async def autocomplete(
	q: str = Query(..., description="Title prefix, matched case-insensitively"),
	service: MovieLocationService = Depends(get_movie_service),
):
	"""Return up to ten distinct, sorted titles starting with `q`."""
	start = time.time()  # start timer
	titles = await service.autocomplete(q)  # delegate to service
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /movies/autocomplete q={q!r} served {len(titles)} titles in {elapsed_ms:.2f} ms")  # summary
	return titles
