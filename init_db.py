#!/usr/bin/env python3
"""
Create the Deck Studio tables and upload directories for local development.
"""
import asyncio

from deckstudio.infra.config.database import get_engine, init_models
from deckstudio.infra.config.logging_config import get_logger, setup_logging
from deckstudio.infra.config.settings import get_settings
from deckstudio.infra.storage.local_file_store import LocalFileStore


async def init_db() -> None:
    settings = get_settings()
    setup_logging(log_format="console")
    log = get_logger("init_db")

    await init_models()
    store = LocalFileStore(settings.upload_root)
    store.ensure_dirs()
    log.info(
        "init_db.done",
        database_url=settings.database_url,
        upload_root=str(store.root),
    )
    await get_engine().dispose()


if __name__ == "__main__":
    asyncio.run(init_db())
