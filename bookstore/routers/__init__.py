"""
API Routers Package

This package contains FastAPI routers that handle API endpoints.

Router Structure:
- general.py: public catalog endpoints and /register
- customer.py: /customer/login and the gated /customer/auth/* endpoints

Each router is imported and registered in main.py.
"""

from bookstore.routers.customer import router as customer_router
from bookstore.routers.general import router as general_router

__all__ = [
    "customer_router",
    "general_router",
]
