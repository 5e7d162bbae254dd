"""
FastAPI server exposing URI parsing, extraction and domain splitting.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from uri_utils.api.models import (
    DomainResponse,
    ExtractionResponse,
    ExtractRequest,
    ParsedURIResponse,
    UsageResponse,
)
from uri_utils.config import get_config
from uri_utils.core import extract_uri, parse_uri
from uri_utils.domain import get_domain_splitter
from uri_utils.exceptions import InvalidURI
from uri_utils.usage import usage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.

    Warms the Public Suffix List on startup.
    """
    logger.info("Starting up: loading public suffix list...")
    get_domain_splitter()
    logger.info("Public suffix list loaded")

    yield

    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title="URI Utils API",
    description="URI parsing, extraction and domain splitting",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "URI Utils API is running"}


@app.get("/v1/parse", response_model=ParsedURIResponse)
async def parse(
    uri: str = Query(..., description="URI to parse"),
    normalize: bool = Query(False, description="Return normalized components"),
    parse_query: bool = Query(False, description="Decompose the query into key/value pairs"),
) -> ParsedURIResponse:
    """
    Parse a single URI.

    Raises:
        422: If the URI is malformed
    """
    try:
        parsed = parse_uri(uri, normalize=normalize, parse_query=parse_query)
    except InvalidURI as e:
        logger.warning(f"URI parse failed: {e}")
        raise HTTPException(status_code=422, detail=e.reason)
    return ParsedURIResponse.from_parsed(parsed)


@app.post("/v1/extract", response_model=ExtractionResponse)
async def extract(request: ExtractRequest) -> ExtractionResponse:
    """
    Extract all URIs from a block of text.

    Raises:
        413: If the text exceeds api.max_text_length
    """
    max_length = get_config().api.max_text_length
    if len(request.text) > max_length:
        logger.warning(f"Rejected extract request of {len(request.text)} characters")
        raise HTTPException(
            status_code=413, detail=f"Text longer than {max_length} characters"
        )

    result = extract_uri(request.text, normalize=request.normalize)
    return ExtractionResponse.from_result(result)


@app.get("/v1/domain/{domain}", response_model=DomainResponse)
async def domain_labels(domain: str) -> DomainResponse:
    """Split a domain into labels and look up its eTLD+1."""
    splitter = get_domain_splitter()
    return DomainResponse(
        domain=domain,
        labels=splitter.labels(domain),
        registered_domain=splitter.registered_domain(domain),
        public_suffix=splitter.public_suffix(domain),
    )


@app.get("/v1/usage/{function}", response_model=UsageResponse)
async def usage_text(
    function: str,
    option: Optional[str] = Query(None, description="'usage' for the full text"),
) -> UsageResponse:
    """
    Help text for an entry point.

    Raises:
        404: If function is not a known entry point
    """
    try:
        text = usage(function, option)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown function: {function}")
    return UsageResponse(function=function, text=text)


@app.exception_handler(404)
async def not_found_handler(request, exc):
    """Custom 404 handler."""
    return JSONResponse(status_code=404, content={"detail": str(exc.detail)})


@app.exception_handler(500)
async def internal_error_handler(request, exc):
    """Custom 500 handler."""
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def main():
    """Run the server (for development)."""
    import uvicorn

    config = get_config()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        app, host=config.api.host, port=config.api.port, log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
