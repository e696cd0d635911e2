"""
Reload drivers for a configuration manager.

The manager never schedules itself. These watchers call Manager.reload()
from the asyncio event loop, either on a fixed polling interval or when
watchdog reports a filesystem event for the backing file.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ...core.exceptions import ConfigStoreError
from ..logging.setup import get_logger
from .manager import Manager

logger = get_logger(__name__)


class IConfigWatcher(ABC):
    """Interface for configuration file watchers."""

    @abstractmethod
    async def start(self) -> None:
        """Start watching for configuration changes."""
        pass

    @abstractmethod
    async def stop(self) -> None:
        """Stop watching for configuration changes."""
        pass

    @abstractmethod
    def is_running(self) -> bool:
        """Check if the watcher is currently running."""
        pass


def reload_manager(manager: Manager) -> bool:
    """
    Reload a manager, logging store errors instead of raising them.

    Args:
        manager: Manager to reload

    Returns:
        True if a new config was adopted
    """
    try:
        return manager.reload()
    except ConfigStoreError as e:
        logger.error(f"Error reloading configuration {manager.file_path}: {e}")
        return False


class ConfigFileHandler(FileSystemEventHandler):
    """
    Handles file system events for the configuration file.

    Events arrive on the watchdog thread and are handed to the event loop,
    where a debounced reload runs so the manager is only driven from one
    thread.
    """

    def __init__(
        self,
        manager: Manager,
        loop: asyncio.AbstractEventLoop,
        debounce_delay: float = 0.5
    ):
        """
        Initialize the file handler.

        Args:
            manager: Manager to reload when the file changes
            loop: Event loop the reload runs on
            debounce_delay: Delay in seconds to debounce rapid changes
        """
        super().__init__()
        self.manager = manager
        self.config_path = manager.file_path.resolve()
        self.loop = loop
        self.debounce_delay = debounce_delay
        self.last_modified: float = 0.0
        self._pending_task: Optional[asyncio.Task[None]] = None

    def on_modified(self, event: FileSystemEvent) -> None:
        """
        Handle file modification events with debounce protection.

        Args:
            event: File system event
        """
        if not event.is_directory and Path(str(event.src_path)) == self.config_path:
            current_time = time.time()
            if current_time - self.last_modified > self.debounce_delay:
                self.last_modified = current_time
                logger.debug(f"Configuration file change detected: {self.config_path}")
                self.loop.call_soon_threadsafe(self._schedule_reload)

    def on_created(self, event: FileSystemEvent) -> None:
        self.on_modified(event)

    def on_moved(self, event: FileSystemEvent) -> None:
        """
        Handle file move events, such as editors replacing the file.

        Args:
            event: File system event
        """
        if not event.is_directory and Path(str(event.dest_path)) == self.config_path:
            logger.debug(f"Configuration file moved to: {self.config_path}")
            current_time = time.time()
            if current_time - self.last_modified > self.debounce_delay:
                self.last_modified = current_time
                self.loop.call_soon_threadsafe(self._schedule_reload)

    def _schedule_reload(self) -> None:
        """Replace any pending reload with a new debounced one. Runs on the loop."""
        if self._pending_task and not self._pending_task.done():
            self._pending_task.cancel()
        self._pending_task = self.loop.create_task(self._debounced_reload())

    async def _debounced_reload(self) -> None:
        """Execute debounced reload."""
        try:
            await asyncio.sleep(self.debounce_delay)
            if reload_manager(self.manager):
                logger.info(f"Configuration reloaded from {self.config_path}")
        except asyncio.CancelledError:
            logger.debug("Configuration reload cancelled, waiting for new changes")


class ConfigWatcher(IConfigWatcher):
    """
    Configuration file watcher using the watchdog library.

    Watches the directory holding the backing file and reloads the manager
    when the file is modified, created or moved into place.
    """

    def __init__(self, manager: Manager, debounce_delay: float = 0.5):
        """
        Initialize the configuration watcher.

        Args:
            manager: Manager to reload
            debounce_delay: Delay in seconds to debounce rapid changes
        """
        self.manager = manager
        self.debounce_delay = debounce_delay

        self._observer: Optional[Any] = None
        self._handler: Optional[ConfigFileHandler] = None
        self._running = False

    async def start(self) -> None:
        """Start watching for configuration file changes."""
        if self._running:
            logger.warning("Configuration watcher is already running")
            return

        watch_dir = self.manager.file_path.resolve().parent
        try:
            self._handler = ConfigFileHandler(
                manager=self.manager,
                loop=asyncio.get_running_loop(),
                debounce_delay=self.debounce_delay
            )

            self._observer = Observer()
            self._observer.schedule(self._handler, str(watch_dir), recursive=False)
            self._observer.start()
            self._running = True

            logger.info(f"Started watching configuration file: {self.manager.file_path}")

        except Exception as e:
            logger.error(f"Failed to start configuration watcher: {e}")
            self._observer = None
            self._handler = None
            raise

    async def stop(self) -> None:
        """Stop watching for configuration file changes."""
        if not self._running:
            return

        if self._observer:
            self._observer.stop()
            if self._observer.is_alive():
                self._observer.join(timeout=5.0)
            self._observer = None

        # Cancel any pending reload task
        if self._handler and self._handler._pending_task:
            if not self._handler._pending_task.done():
                self._handler._pending_task.cancel()
                try:
                    await self._handler._pending_task
                except asyncio.CancelledError:
                    pass

        self._handler = None
        self._running = False

        logger.info("Stopped configuration file watcher")

    def is_running(self) -> bool:
        """Check if the watcher is currently running."""
        return self._running and self._observer is not None and self._observer.is_alive()


class PollingConfigWatcher(IConfigWatcher):
    """
    Configuration watcher using polling.

    Each tick asks the manager whether the file moved since the last sync
    and reloads it when it did.
    """

    def __init__(self, manager: Manager, poll_interval: float = 1.0):
        """
        Initialize the polling watcher.

        Args:
            manager: Manager to reload
            poll_interval: Interval in seconds between polls
        """
        self.manager = manager
        self.poll_interval = poll_interval

        self._running = False
        self._task: Optional[asyncio.Task[None]] = None

    async def start(self) -> None:
        """Start polling for configuration file changes."""
        if self._running:
            logger.warning("Polling configuration watcher is already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._poll_loop())

        logger.info(f"Started polling configuration file: {self.manager.file_path}")

    async def stop(self) -> None:
        """Stop polling for configuration file changes."""
        if not self._running:
            return

        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info("Stopped polling configuration file watcher")

    def is_running(self) -> bool:
        """Check if the watcher is currently running."""
        return self._running and self._task is not None and not self._task.done()

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        while self._running:
            if self.manager.has_changed_on_disk():
                if reload_manager(self.manager):
                    logger.info(f"Configuration file changed: {self.manager.file_path}")
            await asyncio.sleep(self.poll_interval)


def create_config_watcher(
    manager: Manager,
    use_polling: bool = True,
    **kwargs: Any
) -> IConfigWatcher:
    """
    Create a configuration file watcher.

    Args:
        manager: Manager to reload
        use_polling: Poll instead of listening for file system events
        **kwargs: poll_interval or debounce_delay

    Returns:
        Configuration watcher instance
    """
    if use_polling:
        return PollingConfigWatcher(
            manager=manager,
            poll_interval=kwargs.get('poll_interval', 1.0)
        )
    return ConfigWatcher(
        manager=manager,
        debounce_delay=kwargs.get('debounce_delay', 0.5)
    )
