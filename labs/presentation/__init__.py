"""Presentation layer: FastAPI routers, response envelope and error mapping."""
