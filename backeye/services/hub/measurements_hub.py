# backeye/services/hub/measurements_hub.py
from typing import Dict, Optional, Sequence
from uuid import uuid4
from fastapi import WebSocket
import json
import logging

from ...schemas.measurement_schemas import MeasurementDto

logger = logging.getLogger(__name__)

class MeasurementsHub:
    """Fans newly stored measurements out to connected dashboards"""

    def __init__(self):
        # Store active connections: {connection_id: {websocket, lesson_id}}
        self.active_connections: Dict[str, Dict] = {}

    async def connect(self, websocket: WebSocket, lesson_id: Optional[int] = None) -> str:
        """Accept websocket connection and remember its lesson scope"""
        await websocket.accept()
        connection_id = uuid4().hex

        self.active_connections[connection_id] = {
            "websocket": websocket,
            "lesson_id": lesson_id,
        }

        logger.info(f"Dashboard {connection_id} connected (lesson: {lesson_id})")

        await self.send_personal_message({
            "type": "connection_status",
            "status": "connected",
            "connection_id": connection_id,
            "lesson_id": lesson_id
        }, connection_id)
        return connection_id

    def disconnect(self, connection_id: str):
        if connection_id in self.active_connections:
            del self.active_connections[connection_id]
            logger.info(f"Dashboard {connection_id} disconnected")

    def subscribe(self, connection_id: str, lesson_id: Optional[int]):
        """Restrict a connection to one lesson, or to none when ``lesson_id`` is None"""
        if connection_id not in self.active_connections:
            logger.warning(f"Dashboard {connection_id} not connected, cannot subscribe")
            return
        self.active_connections[connection_id]["lesson_id"] = lesson_id
        logger.info(f"Dashboard {connection_id} now follows lesson {lesson_id}")

    async def send_personal_message(self, message: dict, connection_id: str):
        if connection_id in self.active_connections:
            websocket = self.active_connections[connection_id]["websocket"]
            try:
                await websocket.send_text(json.dumps(message))
            except Exception as e:
                logger.error(f"Error sending message to {connection_id}: {e}")
                self.disconnect(connection_id)

    async def send(self, measurements: Sequence[MeasurementDto]) -> int:
        """Push measurements to every dashboard following their lesson.

        Returns the number of dashboards that received at least one measurement.
        """
        if not measurements:
            return 0

        disconnected = []
        sent_count = 0

        for connection_id, connection in list(self.active_connections.items()):
            lesson_id = connection["lesson_id"]
            selected = [
                m for m in measurements
                if lesson_id is None or m.lesson_id == lesson_id
            ]
            if not selected:
                continue

            message = {
                "type": "measurements",
                "measurements": [m.model_dump(mode="json", by_alias=True) for m in selected]
            }
            try:
                await connection["websocket"].send_text(json.dumps(message))
                sent_count += 1
            except Exception as e:
                logger.error(f"Error broadcasting to {connection_id}: {e}")
                disconnected.append(connection_id)

        for connection_id in disconnected:
            self.disconnect(connection_id)

        logger.info(f"Broadcast of {len(measurements)} measurements sent to {sent_count} dashboards")
        return sent_count

    def connection_count(self) -> int:
        return len(self.active_connections)

# Global hub instance
measurements_hub = MeasurementsHub()
