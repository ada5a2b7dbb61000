"""WebSocket push channel tests."""

import time


def _wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return predicate()


class TestMarketStream:
    """Envelope shape, cadence and connection cleanup over /ws."""

    def test_first_message_is_full_snapshot(self, client):
        with client.websocket_connect("/ws") as websocket:
            message = websocket.receive_json()

        assert message["type"] == "market_update"
        data = message["data"]
        assert len(data["stocks"]) == 5
        assert len(data["currencies"]) == 4
        assert len(data["indices"]) == 4
        assert len(data["news"]) == 4
        assert data["timestamp"]

    def test_pushes_repeat(self, client):
        with client.websocket_connect("/ws") as websocket:
            first = websocket.receive_json()
            second = websocket.receive_json()

        assert first["type"] == second["type"] == "market_update"

    def test_client_frames_are_ignored(self, client):
        with client.websocket_connect("/ws") as websocket:
            websocket.receive_json()
            websocket.send_text("hello")
            assert websocket.receive_json()["type"] == "market_update"

    def test_margin_change_appears_in_later_push(self, client, admin_headers):
        with client.websocket_connect("/ws") as websocket:
            websocket.receive_json()
            client.put("/currencies/EUR/USD/margin", json={"margin": 0.75}, headers=admin_headers)

            for _ in range(10):
                pairs = {c["symbol"]: c for c in websocket.receive_json()["data"]["currencies"]}
                if pairs["EUR/USD"]["margin"] == "0.75":
                    break
            else:
                raise AssertionError("margin update never pushed")

    def test_registry_empties_after_close(self, client, app):
        broadcaster = app.state.container.broadcaster()

        with client.websocket_connect("/ws") as websocket:
            websocket.receive_json()
            assert len(broadcaster.connections) == 1

        assert _wait_for(lambda: broadcaster.connections == [])
