# backeye/routers/hub.py
from typing import Optional
from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status
import json
import logging

from ..core.dependencies import get_measurements_hub
from ..core.exceptions import AuthenticationError
from ..core.security import decode_access_token
from ..services.hub import MeasurementsHub

logger = logging.getLogger(__name__)
router = APIRouter()

@router.websocket("/hubs/measurements")
async def measurements_endpoint(
    websocket: WebSocket,
    token: str = Query(...),
    lesson_id: Optional[int] = Query(None),
    hub: MeasurementsHub = Depends(get_measurements_hub)
):
    """WebSocket endpoint streaming new measurements to dashboards"""
    try:
        decode_access_token(token)
    except AuthenticationError:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    connection_id = await hub.connect(websocket, lesson_id)

    try:
        while True:
            data = await websocket.receive_text()
            try:
                message_data = json.loads(data)
            except json.JSONDecodeError:
                await hub.send_personal_message({
                    "type": "error",
                    "message": "Invalid JSON"
                }, connection_id)
                continue

            if not isinstance(message_data, dict):
                await hub.send_personal_message({
                    "type": "error",
                    "message": "Invalid message"
                }, connection_id)
                continue

            message_type = message_data.get("type")

            if message_type == "subscribe":
                try:
                    hub.subscribe(connection_id, int(message_data.get("lessonId")))
                except (TypeError, ValueError):
                    await hub.send_personal_message({
                        "type": "error",
                        "message": "lessonId must be an integer"
                    }, connection_id)
                    continue
                await hub.send_personal_message({
                    "type": "subscribed",
                    "lesson_id": int(message_data.get("lessonId"))
                }, connection_id)

            elif message_type == "unsubscribe":
                hub.subscribe(connection_id, None)
                await hub.send_personal_message({"type": "unsubscribed"}, connection_id)

            elif message_type == "ping":
                await hub.send_personal_message({"type": "pong"}, connection_id)

            else:
                await hub.send_personal_message({
                    "type": "error",
                    "message": f"Unknown message type: {message_type}"
                }, connection_id)

    except WebSocketDisconnect:
        hub.disconnect(connection_id)
    except Exception as e:
        logger.error(f"WebSocket error for dashboard {connection_id}: {e}")
        hub.disconnect(connection_id)
