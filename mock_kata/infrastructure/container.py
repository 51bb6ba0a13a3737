from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.file_sender import FileSender, FileSenderDependencies
from ..config import KataConfig
from .caching.thing_cache import ThingCache
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .services.catalog import load_thing_catalog
from .services.in_memory_thing_service import InMemoryThingService

if TYPE_CHECKING:
    from pathlib import Path

    from ..application.ports.services import (
        CryptographerPort,
        LoggerPort,
        RecognizerPort,
        SenderPort,
        ThingServicePort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: KataConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or KataConfig()
        self._logger_instance: LoggerPort | None = None
        self._thing_service_instance: ThingServicePort | None = None
        self._thing_cache_instance: ThingCache | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_thing_service(self, catalog_path: Path | None = None) -> ThingServicePort:
        if self._thing_service_instance is None:
            catalog = load_thing_catalog(catalog_path or self.config.catalog_path)
            self._thing_service_instance = InMemoryThingService.from_catalog(catalog)
        return self._thing_service_instance

    def create_thing_cache(self, catalog_path: Path | None = None) -> ThingCache:
        if self._thing_cache_instance is None:
            self._thing_cache_instance = ThingCache(
                self.create_thing_service(catalog_path), logger=self.create_logger()
            )
        return self._thing_cache_instance

    def create_file_sender(
        self,
        *,
        cryptographer: CryptographerPort,
        sender: SenderPort,
        recognizer: RecognizerPort,
    ) -> FileSender:
        dependencies = FileSenderDependencies(
            cryptographer=cryptographer,
            sender=sender,
            recognizer=recognizer,
            logger=self.create_logger(),
        )
        return FileSender(dependencies, config=self.config)

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_thing_service(self, thing_service: ThingServicePort) -> None:
        self._thing_service_instance = thing_service
        self._thing_cache_instance = None

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._thing_service_instance = None
        self._thing_cache_instance = None


def create_default_container(
    verbose: int = 0, config: KataConfig | None = None
) -> DependencyContainer:
    return DependencyContainer(verbose=verbose, config=config)