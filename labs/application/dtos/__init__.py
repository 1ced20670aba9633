"""Data transfer objects of the application layer."""

from .common import APIModel, CountDTO, CreatedDTO, ListItemDTO, PageDTO

__all__ = ["APIModel", "CountDTO", "CreatedDTO", "ListItemDTO", "PageDTO"]
