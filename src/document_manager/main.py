from __future__ import annotations

import logging
from typing import Optional

from document_manager.concurrency.locks import ReadWriteLock, NoOpLock
from document_manager.repos.documents import DocumentRepo
from document_manager.services.document import DocumentService
from document_manager.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def configure_logging(config: Settings) -> None:
    # only the package logger; root handlers belong to the host application
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    if config.debug:
        level = logging.DEBUG
    logging.getLogger("document_manager").setLevel(level)


def create_manager(config: Optional[Settings] = None) -> DocumentService:

    config = config or default_settings
    configure_logging(config)

    docs = DocumentRepo()
    lock = ReadWriteLock() if config.thread_safe else NoOpLock()

    manager = DocumentService(docs, lock, max_id_attempts=config.max_id_attempts)
    logger.info("%s %s ready (thread_safe=%s)", config.app_name, config.app_version, config.thread_safe)

    return manager
