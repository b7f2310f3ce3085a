# chikitsamitra/routes/selectors.py
#
# One cascading selector per connection. Client sends
#   {"field": "state" | "district" | "hospital", "value": "..."}
# and receives a full snapshot after every transition:
#   {"type": "snapshot", "group": ..., "state": {...}, "district": {...}, "hospital": {...}}
# or {"type": "error", "message": ...} for a rejected event.

import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, Dict, Set

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status

from chikitsamitra.services.directory_service import DirectoryClient, get_directory_client
from chikitsamitra.services.selector_service import SELECTOR_FACTORIES, InvalidSelectionError

logger = logging.getLogger("selectors")

router = APIRouter(prefix="/selectors", tags=["Selectors"])

Sender = Callable[[Dict[str, Any]], Awaitable[None]]


async def run_selector_event(group: str, coro: Awaitable[None], send: Sender) -> None:
    """Await one selector transition; a rejected value is reported, anything else logged."""
    try:
        try:
            await coro
        except InvalidSelectionError as e:
            await send({"type": "error", "message": str(e)})
    except Exception as e:
        logger.error(f"[{group}] selector event failed: {e}")


@router.websocket("/{group}")
async def selector_stream(
    websocket: WebSocket,
    group: str,
    directory: DirectoryClient = Depends(get_directory_client)
):
    factory = SELECTOR_FACTORIES.get(group)
    if factory is None:
        logger.warning(f"Unknown selector group '{group}'")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    logger.info(f"[{group}] selector connected")

    send_lock = asyncio.Lock()
    tasks: Set[asyncio.Task] = set()

    async def send(message: Dict[str, Any]) -> None:
        async with send_lock:
            await websocket.send_json(message)

    async def on_change(snapshot: Dict[str, Any]) -> None:
        await send({"type": "snapshot", **snapshot})

    selector = factory(directory, on_change)

    def dispatch(coro) -> None:
        task = asyncio.create_task(run_selector_event(group, coro, send))
        tasks.add(task)
        task.add_done_callback(tasks.discard)

    dispatch(selector.mount())

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                event = json.loads(raw)
                field = event["field"]
                value = event.get("value") or ""
            except (ValueError, KeyError, TypeError, AttributeError):
                await send({"type": "error", "message": "Expected {\"field\": ..., \"value\": ...}"})
                continue

            logger.debug(f"[{group}] {field} -> '{value}'")
            dispatch(selector.select(str(field), str(value)))

    except WebSocketDisconnect:
        logger.info(f"[{group}] selector disconnected")

    finally:
        pending = list(tasks)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
