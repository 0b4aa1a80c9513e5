"""Package routes: exports all FastAPI routers."""

from .health import router as health_router
from .pets import router as pets_router
from .weights import router as weights_router

__all__ = ["health_router", "pets_router", "weights_router"]
