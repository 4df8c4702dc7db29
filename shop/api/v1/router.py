from ninja import NinjaAPI

from .pickup.api import router as pickup_router

api = NinjaAPI(
    title="SHOP API",
    version="1.0.0",
    description="""
    # SHOP API Documentation

    ## Pickup points
    Pickup point search and selection for the current session cart.

    ## Error Codes
    - 400: Bad Request
    - 404: Not Found
    - 409: Conflict
    """,
    docs_url="/docs",
    openapi_url="/openapi.json",
    urls_namespace="api_v1",
)

api.add_router("/pickup/", pickup_router)
