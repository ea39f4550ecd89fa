from datetime import datetime, timedelta

from data.models import TrafficRecord
from core.traffic_generator import utc_now


def _insert(container, domain, upload, download, protocol="HTTPS", age=timedelta(minutes=1)):
    record = TrafficRecord(
        timestamp=(utc_now() - age).strftime("%Y-%m-%d %H:%M:%S"),
        source_ip="192.168.1.1",
        destination_ip="104.26.12.1",
        domain=domain,
        protocol=protocol,
        upload_bytes=upload,
        download_bytes=download,
    )
    return container.get("traffic_repository").insert_record(record)


def test_summary_shape_and_values(client, auth_headers, container):
    _insert(container, "x", 100, 200)
    _insert(container, "x", 300, 50, protocol="DNS")
    _insert(container, "y", 1, 1)

    response = client.get("/api/traffic/summary", headers=auth_headers)
    body = response.get_json()

    assert response.status_code == 200
    assert body["stats"] == {"total_upload": 401, "total_download": 251, "total_packets": 3}
    assert body["topDomains"][0] == {"domain": "x", "total_bytes": 650}
    assert {row["protocol"]: row["count"] for row in body["protocolStats"]} == {"HTTPS": 2, "DNS": 1}
    assert body["usage"]["total_bytes"] == 652
    assert body["usage"]["over_limit"] is False


def test_summary_flags_usage_over_limit(client, auth_headers, container):
    _insert(container, "big.example", 2 * 1024 ** 3, 0)
    client.post("/api/settings", headers=auth_headers, json={"data_limit_gb": 1, "alerts_enabled": True})

    usage = client.get("/api/traffic/summary", headers=auth_headers).get_json()["usage"]

    assert usage["over_limit"] is True
    assert usage["total_human"] == "2.00 GiB"
    assert usage["alerts_enabled"] is True


def test_summary_on_empty_store(client, auth_headers):
    body = client.get("/api/traffic/summary", headers=auth_headers).get_json()
    assert body["stats"] == {"total_upload": 0, "total_download": 0, "total_packets": 0}
    assert body["topDomains"] == []
    assert body["protocolStats"] == []


def test_history_is_ascending_and_recent_only(client, auth_headers, container):
    _insert(container, "a", 1, 1, age=timedelta(hours=5))
    _insert(container, "a", 2, 2, age=timedelta(hours=1))
    _insert(container, "a", 9, 9, age=timedelta(hours=30))

    history = client.get("/api/traffic/history", headers=auth_headers).get_json()

    hours = [bucket["hour"] for bucket in history]
    assert hours == sorted(hours)
    cutoff = utc_now() - timedelta(hours=25)
    assert all(datetime.strptime(hour, "%Y-%m-%d %H:%M:%S") > cutoff for hour in hours)
    assert sum(bucket["upload"] for bucket in history) == 3


def test_recent_returns_newest_first(client, auth_headers, container):
    older = _insert(container, "old", 1, 1, age=timedelta(minutes=10))
    newer = _insert(container, "new", 1, 1, age=timedelta(minutes=1))

    records = client.get("/api/traffic/recent?limit=1", headers=auth_headers).get_json()

    assert [record["id"] for record in records] == [newer.id]
    assert older.id != newer.id


def test_recent_rejects_bad_limit(client, auth_headers):
    assert client.get("/api/traffic/recent?limit=abc", headers=auth_headers).status_code == 400
    assert client.get("/api/traffic/recent?limit=0", headers=auth_headers).status_code == 400
    assert client.get("/api/traffic/recent?limit=100000", headers=auth_headers).status_code == 400


def test_health_reports_subscribers(client):
    response = client.get("/api/health")
    assert response.get_json() == {"status": "healthy", "subscribers": 0}


def test_unknown_route_returns_json_404(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.get_json()["error"] == "Not found"
