import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass
class _Ask:
    """Envelope pairing a message with the future awaiting its reply."""
    message: Any
    future: asyncio.Future


_STOP = object()  # Poison pill


class BaseActor(ABC):
    """
    Abstract Base Actor.

    Owns a mailbox (asyncio.Queue) drained by a single background task,
    so `handle_message` never runs concurrently with itself. State kept
    on the actor is only touched from that task.
    """
    def __init__(self):
        self._queue: asyncio.Queue = asyncio.Queue()
        self._running = False
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._running

    async def start(self):
        """Starts the actor's processing loop in the background."""
        if self._running:
            return
        self._running = True
        self._task = asyncio.create_task(self._process_mailbox())

    async def stop(self):
        """Stops the actor after the messages already queued are handled."""
        if not self._running:
            return
        # Refuse new asks before the pill is queued; nothing would answer them.
        self._running = False
        await self._queue.put(_STOP)
        if self._task:
            await self._task
        self._task = None

    async def tell(self, message):
        """Fire and forget: Send a message without waiting."""
        await self._queue.put(message)

    async def ask(self, message):
        """Request-Response: Send a message and wait for a reply."""
        if not self._running:
            raise RuntimeError(f"{type(self).__name__} is not running")
        future = asyncio.get_running_loop().create_future()
        await self._queue.put(_Ask(message, future))
        return await future

    async def _process_mailbox(self):
        """Internal loop that pulls messages off the queue."""
        while True:
            item = await self._queue.get()

            if item is _STOP:
                break

            if isinstance(item, _Ask):
                try:
                    result = await self.handle_message(item.message)
                except Exception as e:
                    if not item.future.done():
                        item.future.set_exception(e)
                else:
                    if not item.future.done():
                        item.future.set_result(result)
            else:
                try:
                    await self.handle_message(item)
                except Exception:
                    # Nobody is waiting on a tell; keep the mailbox alive.
                    logger.exception("%s failed handling %r", type(self).__name__, item)

        self._fail_pending()

    def _fail_pending(self):
        """Reject asks that arrived after the stop request."""
        while not self._queue.empty():
            item = self._queue.get_nowait()
            if isinstance(item, _Ask) and not item.future.done():
                item.future.set_exception(RuntimeError(f"{type(self).__name__} stopped"))

    @abstractmethod
    async def handle_message(self, message):
        """Subclasses must implement this to define behavior."""
        pass
