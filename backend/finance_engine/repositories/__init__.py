from .catalog_repository import CatalogRepository, load_catalog, parse_catalog

__all__ = [
    "CatalogRepository",
    "load_catalog",
    "parse_catalog",
]
