"""
API route modules.

Each module defines routes for one step of the workflow.
"""

from routes.product_search import router as product_search_router
from routes.draft_orders import router as draft_orders_router

__all__ = [
    "product_search_router",
    "draft_orders_router",
]
