from __future__ import annotations

import logging

from dotenv import load_dotenv

from persistence import DiskJsonDocumentStore, Repositories, build_repositories
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Install a root handler; call once from the process entry point."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_repositories(settings: Settings | None = None) -> Repositories:
    """
    Wire the datastore: one store on the configured file, shared by every repository.
    """
    if settings is None:
        load_dotenv("local.env")
        settings = get_settings()

    store = DiskJsonDocumentStore(
        settings.datasource,
        atomic=settings.atomic_writes,
        indent=settings.json_indent,
    )
    logger.info("Using data source %s (atomic writes: %s)", store.path, settings.atomic_writes)
    return build_repositories(store)
