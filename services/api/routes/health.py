"""
Health check endpoints for container orchestration.

/health/fast has no imports from our codebase so it responds even while the
rest of the app is failing to load.
"""
from fastapi import APIRouter
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


# =============================================================================
# Always 200: no config loading, no database calls
# =============================================================================
@router.get("/health/fast")
async def fast_health():
    """Minimal healthcheck - always returns 200."""
    return JSONResponse(content={"ok": True}, status_code=200)


# =============================================================================
# Secondary endpoints - these can have dependencies
# =============================================================================
@router.get("/health")
async def health_check():
    """Full health check with service status."""
    from datetime import datetime
    try:
        from ..config import get_config
        config = get_config()
        return {
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "service": "resume-tailor-api",
            "openai_key_loaded": config.openai_key_loaded,
            "openai_env_source": config.openai_env_source,
            "openai_model": config.openai_model,
            "rate_limit_retries": config.max_rate_limit_retries,
            "database_path": config.database_path,
        }
    except Exception as e:
        return {
            "status": "degraded",
            "error": str(e),
            "timestamp": datetime.utcnow().isoformat(),
        }


@router.get("/health/ready")
async def readiness_check():
    """Ready when the generation API credential is present."""
    from datetime import datetime
    from ..config import get_openai_api_key
    key, source = get_openai_api_key()
    body = {
        "status": "ready" if key else "not_ready",
        "timestamp": datetime.utcnow().isoformat(),
        "openai_key_loaded": key is not None,
        "openai_env_source": source,
    }
    return JSONResponse(content=body, status_code=200 if key else 503)
