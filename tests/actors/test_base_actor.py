import pytest
import asyncio
from waitforit.infrastructure.actors.base import BaseActor

# 1. Define a fake actor for testing purposes
class EchoActor(BaseActor):
    def __init__(self):
        super().__init__()
        self.inbox = []  # We'll store received messages here

    async def handle_message(self, message):
        self.inbox.append(message)
        if message == "ping":
            return "pong"
        if message == "boom":
            raise ValueError("boom")

@pytest.mark.asyncio
async def test_actor_receives_message():
    """Test that our BaseActor allows sending and handling messages."""
    actor = EchoActor()
    await actor.start()

    await actor.tell("hello")
    await asyncio.sleep(0.01)  # Give it a tiny moment to process

    assert "hello" in actor.inbox

    await actor.stop()

@pytest.mark.asyncio
async def test_actor_ask_pattern():
    """Test the Request-Response pattern (Ask)."""
    actor = EchoActor()
    await actor.start()

    response = await actor.ask("ping")

    assert response == "pong"
    await actor.stop()

@pytest.mark.asyncio
async def test_ask_propagates_handler_exception():
    """An exception in the handler is raised to the asker."""
    actor = EchoActor()
    await actor.start()

    with pytest.raises(ValueError, match="boom"):
        await actor.ask("boom")

    # The mailbox keeps running afterwards
    assert await actor.ask("ping") == "pong"
    await actor.stop()

@pytest.mark.asyncio
async def test_tell_failure_is_logged_and_mailbox_survives(caplog):
    """A failing tell does not kill the actor."""
    actor = EchoActor()
    await actor.start()

    with caplog.at_level("ERROR"):
        await actor.tell("boom")
        assert await actor.ask("ping") == "pong"

    assert any("failed handling" in r.getMessage() for r in caplog.records)
    await actor.stop()

@pytest.mark.asyncio
async def test_ask_before_start_raises():
    """Asking a stopped actor fails fast instead of hanging."""
    actor = EchoActor()

    with pytest.raises(RuntimeError, match="not running"):
        await actor.ask("ping")

@pytest.mark.asyncio
async def test_messages_handled_in_order():
    """The mailbox handles messages one at a time, in arrival order."""
    actor = EchoActor()
    await actor.start()

    for i in range(5):
        await actor.tell(i)
    await actor.ask("ping")

    assert actor.inbox == [0, 1, 2, 3, 4, "ping"]
    await actor.stop()

@pytest.mark.asyncio
async def test_start_and_stop_are_idempotent():
    actor = EchoActor()
    await actor.start()
    await actor.start()
    assert actor.is_running

    await actor.stop()
    await actor.stop()
    assert not actor.is_running

@pytest.mark.asyncio
async def test_ask_during_shutdown_fails_instead_of_hanging():
    """Once stop has begun, new asks are refused rather than left unanswered."""
    actor = EchoActor()
    await actor.start()

    stop_task = asyncio.create_task(actor.stop())
    await asyncio.sleep(0)  # Let stop begin

    assert not actor.is_running
    with pytest.raises(RuntimeError, match="not running"):
        await asyncio.wait_for(actor.ask("ping"), timeout=1.0)

    await stop_task

@pytest.mark.asyncio
async def test_asks_queued_before_stop_are_answered():
    actor = EchoActor()
    await actor.start()

    pending = asyncio.create_task(actor.ask("ping"))
    await asyncio.sleep(0)
    await actor.stop()

    assert await pending == "pong"
