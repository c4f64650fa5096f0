"""
Health check endpoints for the Word Substitution Proxy application.

This module provides health check endpoints for monitoring
and service discovery.
"""

import platform
from datetime import datetime, timezone

import bs4
import psutil
from bs4.builder import builder_registry
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from loguru import logger

from app.config import settings
from app.configs.substitution import SUPPORTED_PARSERS, get_substitution_settings
from app.models.response import HealthResponse

router = APIRouter()


@router.get("/healthz")
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint.

    Returns:
        JSONResponse: Health status and basic information
    """
    try:
        health = HealthResponse(
            status="healthy",
            service=settings.APP_NAME,
            version=settings.VERSION,
            environment=settings.ENVIRONMENT,
        )
        return JSONResponse(status_code=200, content=health.model_dump(mode="json", exclude_none=True))
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(status_code=503, detail="Service unhealthy")


@router.get("/health")
async def detailed_health_check() -> JSONResponse:
    """
    Detailed health check endpoint with system information.

    Returns:
        JSONResponse: Detailed health status and system metrics
    """
    try:
        system_info = {
            "platform": platform.system(),
            "platform_version": platform.version(),
            "python_version": platform.python_version(),
            "architecture": platform.architecture()[0],
            "beautifulsoup_version": bs4.__version__,
        }

        system_metrics = {
            "cpu_percent": psutil.cpu_percent(interval=None),
            "memory_percent": psutil.virtual_memory().percent,
            "process_rss_bytes": psutil.Process().memory_info().rss,
        }

        health = HealthResponse(
            status="healthy",
            service=settings.APP_NAME,
            version=settings.VERSION,
            environment=settings.ENVIRONMENT,
            system=system_info,
            metrics=system_metrics,
            dependencies=check_dependencies(),
        )
        return JSONResponse(status_code=200, content=health.model_dump(mode="json"))
    except Exception as e:
        logger.error(f"Detailed health check failed: {e}")
        raise HTTPException(status_code=503, detail="Service unhealthy")


def check_dependencies() -> dict[str, bool]:
    """
    Check which HTML tree builders are installed.

    Returns:
        dict: Availability of each supported parser
    """
    return {
        parser: builder_registry.lookup(parser) is not None
        for parser in SUPPORTED_PARSERS
    }


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """
    Readiness check endpoint for Kubernetes/Docker health checks.

    The service is ready when the configured HTML parser is installed.

    Returns:
        JSONResponse: Readiness status
    """
    try:
        configured_parser = get_substitution_settings().parser
        dependencies = check_dependencies()

        if dependencies.get(configured_parser):
            return JSONResponse(
                status_code=200,
                content={
                    "status": "ready",
                    "service": settings.APP_NAME,
                    "parser": configured_parser,
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }
            )
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "service": settings.APP_NAME,
                "missing_dependencies": [configured_parser],
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )
    except Exception as e:
        logger.error(f"Readiness check failed: {e}")
        raise HTTPException(status_code=503, detail="Service not ready")
