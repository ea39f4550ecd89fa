from api.app import get_socketio


def _payloads(received):
    payloads = []
    for message in received:
        if message["name"] != "message":
            continue
        args = message["args"]
        payloads.append(args[0] if isinstance(args, list) else args)
    return payloads


def test_connect_and_disconnect_update_registry(app, container):
    registry = container.get("subscriber_registry")
    socket_client = get_socketio(app).test_client(app)

    assert socket_client.is_connected()
    assert len(registry) == 1

    socket_client.disconnect()
    assert len(registry) == 0


def test_generated_record_is_pushed_to_every_viewer(app, container):
    socketio = get_socketio(app)
    viewers = [socketio.test_client(app) for _ in range(2)]
    for viewer in viewers:
        viewer.get_received()

    record = container.get("traffic_simulator").tick()

    for viewer in viewers:
        assert _payloads(viewer.get_received()) == [{"type": "TRAFFIC_UPDATE", "data": record.to_dict()}]
        viewer.disconnect()


def test_disconnected_viewer_receives_nothing(app, container):
    socketio = get_socketio(app)
    stays = socketio.test_client(app)
    leaves = socketio.test_client(app)
    leaves.disconnect()
    stays.get_received()

    container.get("traffic_simulator").tick()

    assert len(_payloads(stays.get_received())) == 1
    assert len(container.get("subscriber_registry")) == 1
    stays.disconnect()


def test_health_counts_connected_viewers(app, client):
    socket_client = get_socketio(app).test_client(app)
    assert client.get("/api/health").get_json()["subscribers"] == 1
    socket_client.disconnect()
