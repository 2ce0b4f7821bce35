"""Repository for the lender rule catalog loaded from local JSON."""

import json
import logging
import threading
from decimal import Decimal
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from finance_engine.core.exceptions import ConfigurationError
from finance_engine.models.domain.catalog import Catalog, LenderRule, ScoreBand
from finance_engine.models.schemas.catalog import CatalogConfig

logger = logging.getLogger(__name__)

BUNDLED_RULES_PATH = Path(__file__).resolve().parent.parent / "data" / "rules.json"

PathLike = Union[str, Path]


def parse_catalog(data: Any, source: str = "<memory>") -> Catalog:
    """
    Validate raw catalog data and build the immutable domain catalog.

    Args:
        data: Decoded JSON document {meta, scoreBands, lenders}
        source: Where the data came from, used in error messages

    Returns:
        Catalog ready for the estimator

    Raises:
        ConfigurationError: If required fields are missing or malformed
    """
    try:
        config = CatalogConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid rule catalog {source}: {e}") from e

    catalog = config.to_domain()
    _warn_on_overlapping_bands(catalog.score_bands, source)
    return catalog


def load_catalog(path: PathLike) -> Catalog:
    """
    Read and parse a catalog file. Numbers are read as Decimal.

    Raises:
        ConfigurationError: If the file is unreadable, not JSON, or invalid
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f, parse_float=Decimal)
    except OSError as e:
        raise ConfigurationError(f"Cannot read rule catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Rule catalog {path} is not valid JSON: {e}") from e

    return parse_catalog(data, source=str(path))


def _warn_on_overlapping_bands(bands: Sequence[ScoreBand], source: str) -> None:
    for i, band in enumerate(bands):
        for other in bands[i + 1:]:
            if band.overlaps(other):
                logger.warning(
                    f"Score bands '{band.id}' and '{other.id}' overlap in {source}; "
                    f"'{band.id}' wins for shared scores"
                )


class CatalogRepository:
    """
    Repository for the rule catalog.

    Resolves the configured catalog path first and falls back to the
    catalog bundled with the package. The first successful load is cached;
    concurrent first loads are serialized so every caller sees the same
    Catalog instance. Later reads take no lock.
    """

    def __init__(
        self,
        rules_path: Optional[PathLike] = None,
        fallback_path: Optional[PathLike] = BUNDLED_RULES_PATH,
    ):
        """
        Initialize the catalog repository.

        Args:
            rules_path: Preferred catalog location (relative paths resolve
                against the working directory)
            fallback_path: Location used when rules_path does not exist
        """
        self.rules_path = Path(rules_path) if rules_path else None
        self.fallback_path = Path(fallback_path) if fallback_path else None
        self._catalog: Optional[Catalog] = None
        self._lock = threading.Lock()

    def resolve_path(self) -> Path:
        """
        Pick the catalog file to read.

        Raises:
            ConfigurationError: If neither location exists
        """
        for candidate in (self.rules_path, self.fallback_path):
            if candidate is not None and candidate.is_file():
                return candidate

        searched = [str(p) for p in (self.rules_path, self.fallback_path) if p is not None]
        raise ConfigurationError(f"Rule catalog not found (searched: {', '.join(searched)})")

    def read(self) -> Catalog:
        """Load the catalog from its source, bypassing the cache."""
        path = self.resolve_path()
        catalog = load_catalog(path)
        logger.info(
            f"Loaded rule catalog from {path}: "
            f"{len(catalog.score_bands)} score bands, {len(catalog.lenders)} lenders"
        )
        return catalog

    def load(self) -> Catalog:
        """Return the cached catalog, loading it on first use."""
        catalog = self._catalog
        if catalog is not None:
            return catalog

        with self._lock:
            if self._catalog is None:
                self._catalog = self.read()
            return self._catalog

    def reload(self) -> Catalog:
        """Re-read the source and replace the cached catalog."""
        with self._lock:
            self._catalog = self.read()
            return self._catalog

    def list_score_bands(self) -> List[ScoreBand]:
        """Retrieve score bands in catalog order."""
        return list(self.load().score_bands)

    def list_lenders(self) -> List[LenderRule]:
        """Retrieve lender rules in catalog order."""
        return list(self.load().lenders)

    def get_lender(self, lender_id: str) -> Optional[LenderRule]:
        """Retrieve a lender rule by id, or None if not found."""
        return self.load().get_lender(lender_id)
