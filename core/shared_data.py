"""Shared data management for the translator services.

This module defines the SharedData class, a centralized container for the services built
from the configuration: persistent storage, the lexicon store and resolution engine, the
offline pack manager, the remote delegate and the translation manager.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from core.kv_storage import KeyValueStorage
from core.lexicon.store import LexiconStore
from core.packs.downloader import PackDownloader
from core.packs.manager import OfflinePackManager
from core.resolve.engine import ResolutionEngine
from core.trans.interface import EngineContext
from core.trans.manager import TransManager
from core.trans.remote import RemoteDelegate
from handlers.async_comm import AsyncHttp
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config


__all__: list[str] = ["SharedData"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

T = TypeVar("T")


@dataclass
class SharedData:
    _config: Config = field()
    _storage: KeyValueStorage | None = field(init=False, default=None)
    _lexicon_store: LexiconStore | None = field(init=False, default=None)
    _resolution_engine: ResolutionEngine | None = field(init=False, default=None)
    _pack_manager: OfflinePackManager | None = field(init=False, default=None)
    _remote_delegate: RemoteDelegate | None = field(init=False, default=None)
    _trans_manager: TransManager | None = field(init=False, default=None)

    async def async_init(self) -> None:
        """Build every service and restore persisted pack state.

        Lexicon files that fail to load are logged and skipped.
        """
        self._storage = KeyValueStorage(self.config.OFFLINE.STORAGE_PATH)

        self._lexicon_store = LexiconStore()
        if self.config.LEXICON.EXTRA_FILES:
            count: int = self._lexicon_store.load_files(self.config.LEXICON.EXTRA_FILES)
            logger.info("Loaded %d lexicon file(s)", count)
        self._resolution_engine = ResolutionEngine(self._lexicon_store)

        downloader = PackDownloader(
            steps=self.config.OFFLINE.DOWNLOAD_STEPS, step_delay=self.config.OFFLINE.DOWNLOAD_STEP_DELAY
        )
        self._pack_manager = OfflinePackManager(self._storage, downloader=downloader)
        self._pack_manager.load_state()

        self._remote_delegate = RemoteDelegate(
            AsyncHttp(),
            self.config.REMOTE.ENDPOINT,
            max_chunk_length=self.config.REMOTE.MAX_CHUNK_LENGTH,
            timeout=self.config.REMOTE.TIMEOUT,
        )

        context = EngineContext(
            resolution_engine=self._resolution_engine,
            pack_manager=self._pack_manager,
            remote_delegate=self._remote_delegate,
        )
        self._trans_manager = TransManager(self.config, context)
        await self._trans_manager.initialize()
        logger.info("Active translation engines: %s", self._trans_manager.fetch_engine_names())

    async def async_teardown(self) -> None:
        """Close engines, the HTTP session and the storage connection.

        Safe to call after a failed or partial ``async_init``; services that were never
        built are skipped.
        """
        if self._trans_manager is not None:
            await self._trans_manager.shutdown_engines()
        if self._remote_delegate is not None:
            await self._remote_delegate.http.close()
        if self._storage is not None:
            self._storage.close()

    @property
    def config(self) -> Config:
        return self._config

    @staticmethod
    def _built(service: T | None, name: str) -> T:
        if service is None:
            msg = f"{name} is not available before async_init completes"
            raise RuntimeError(msg)
        return service

    @property
    def storage(self) -> KeyValueStorage:
        return self._built(self._storage, "storage")

    @property
    def lexicon_store(self) -> LexiconStore:
        return self._built(self._lexicon_store, "lexicon_store")

    @property
    def resolution_engine(self) -> ResolutionEngine:
        return self._built(self._resolution_engine, "resolution_engine")

    @property
    def pack_manager(self) -> OfflinePackManager:
        return self._built(self._pack_manager, "pack_manager")

    @property
    def remote_delegate(self) -> RemoteDelegate:
        return self._built(self._remote_delegate, "remote_delegate")

    @property
    def trans_manager(self) -> TransManager:
        return self._built(self._trans_manager, "trans_manager")
