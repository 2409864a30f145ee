"""MeasurementsHub fan-out and the dashboard WebSocket endpoint."""

import json

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from backeye.core.dependencies import get_measurements_hub
from backeye.core.security import create_access_token
from backeye.main import app as backeye_app
from backeye.schemas import MeasurementDto
from backeye.services.hub import MeasurementsHub


class FakeWebSocket:
    def __init__(self, fail=False):
        self.fail = fail
        self.accepted = False
        self.frames = []

    async def accept(self):
        self.accepted = True

    async def send_text(self, text):
        if self.fail:
            raise RuntimeError("socket closed")
        self.frames.append(json.loads(text))


def measurement(lesson_id, person_id=1):
    return MeasurementDto(id=person_id, lesson_id=lesson_id, person_id=person_id, on_top=True)


class TestHub:
    async def test_connect_sends_status(self):
        hub = MeasurementsHub()
        websocket = FakeWebSocket()

        await hub.connect(websocket, lesson_id=3)

        assert websocket.accepted
        assert websocket.frames[0]["type"] == "connection_status"
        assert websocket.frames[0]["lesson_id"] == 3
        assert hub.connection_count() == 1

    async def test_send_respects_lesson_scope(self):
        hub = MeasurementsHub()
        everything, lesson_one, lesson_two = FakeWebSocket(), FakeWebSocket(), FakeWebSocket()
        await hub.connect(everything)
        await hub.connect(lesson_one, lesson_id=1)
        await hub.connect(lesson_two, lesson_id=2)
        for websocket in (everything, lesson_one, lesson_two):
            websocket.frames.clear()

        sent = await hub.send([measurement(1, 10), measurement(1, 11)])

        assert sent == 2
        assert len(everything.frames[0]["measurements"]) == 2
        assert lesson_one.frames[0]["measurements"][0]["personId"] == 10
        assert lesson_two.frames == []

    async def test_failing_socket_is_dropped(self):
        hub = MeasurementsHub()
        healthy = FakeWebSocket()
        await hub.connect(healthy)
        broken = FakeWebSocket()
        await hub.connect(broken)
        broken.fail = True

        sent = await hub.send([measurement(1)])

        assert sent == 1
        assert hub.connection_count() == 1
        assert healthy.frames[-1]["type"] == "measurements"

    async def test_subscribe_changes_scope(self):
        hub = MeasurementsHub()
        websocket = FakeWebSocket()
        connection_id = await hub.connect(websocket)

        hub.subscribe(connection_id, 5)
        await hub.send([measurement(4)])
        assert websocket.frames[-1]["type"] == "connection_status"

        hub.subscribe(connection_id, None)
        await hub.send([measurement(4)])
        assert websocket.frames[-1]["type"] == "measurements"

    async def test_send_nothing(self):
        assert await MeasurementsHub().send([]) == 0


@pytest.fixture
def ws_client():
    hub = MeasurementsHub()
    backeye_app.dependency_overrides[get_measurements_hub] = lambda: hub
    with TestClient(backeye_app) as client:
        yield client
    backeye_app.dependency_overrides.clear()


def hub_url(**params):
    query = {"token": create_access_token(1, "TEACHER"), **params}
    return "/hubs/measurements?" + "&".join(f"{key}={value}" for key, value in query.items())


class TestWebSocketEndpoint:
    def test_test_endpoint_reaches_dashboard(self, ws_client):
        with ws_client.websocket_connect(hub_url()) as websocket:
            assert websocket.receive_json()["status"] == "connected"

            response = ws_client.get("/api/Measurement/TestSignalR")
            assert response.status_code == 200

            frame = websocket.receive_json()
            assert frame["type"] == "measurements"
            assert [m["personId"] for m in frame["measurements"]] == [17, 16]

    def test_ping_and_subscribe(self, ws_client):
        with ws_client.websocket_connect(hub_url(lesson_id=1)) as websocket:
            websocket.receive_json()

            websocket.send_json({"type": "ping"})
            assert websocket.receive_json() == {"type": "pong"}

            websocket.send_json({"type": "subscribe", "lessonId": 7})
            assert websocket.receive_json() == {"type": "subscribed", "lesson_id": 7}

            websocket.send_json({"type": "subscribe", "lessonId": "x"})
            assert websocket.receive_json()["type"] == "error"

            websocket.send_json({"type": "dance"})
            assert websocket.receive_json()["message"] == "Unknown message type: dance"

    def test_malformed_frames_get_an_error_and_keep_the_connection(self, ws_client):
        with ws_client.websocket_connect(hub_url()) as websocket:
            websocket.receive_json()

            websocket.send_text("{not json")
            assert websocket.receive_json() == {"type": "error", "message": "Invalid JSON"}

            for frame in ([1, 2], "x", 5):
                websocket.send_json(frame)
                assert websocket.receive_json() == {"type": "error", "message": "Invalid message"}

            websocket.send_json({"type": "ping"})
            assert websocket.receive_json() == {"type": "pong"}
            assert ws_client.get("/health/hub-health").json()["connected_dashboards"] == 1

    def test_invalid_token_is_refused(self, ws_client):
        with pytest.raises(WebSocketDisconnect):
            with ws_client.websocket_connect("/hubs/measurements?token=garbage") as websocket:
                websocket.receive_json()
