"""Process-wide report store and the FastAPI dependencies that hand it out."""

import logging
from functools import lru_cache

from fastapi import Depends

from marche_covid.config import settings
from marche_covid.core.statistics import StatisticsEngine
from marche_covid.core.store import ReportStore

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_store() -> ReportStore:
    """Get the report store, loading it from DATA_FILE on first use."""
    logger.info(f"Loading {settings.region_name} daily reports from {settings.data_file}")
    return ReportStore.load(settings.data_file)


def get_engine(store: ReportStore = Depends(get_store)) -> StatisticsEngine:
    """Get a statistics engine over the report store."""
    return StatisticsEngine(store)
