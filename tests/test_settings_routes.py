import pytest


def test_default_settings(client, auth_headers):
    response = client.get("/api/settings", headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json() == {"data_limit_gb": 100.0, "alerts_enabled": True}


def test_settings_update_round_trips(client, auth_headers):
    update = client.post("/api/settings", headers=auth_headers,
                         json={"data_limit_gb": 12.5, "alerts_enabled": False})
    assert update.status_code == 200
    assert update.get_json() == {"data_limit_gb": 12.5, "alerts_enabled": False}

    response = client.get("/api/settings", headers=auth_headers)
    assert response.get_json() == {"data_limit_gb": 12.5, "alerts_enabled": False}


def test_settings_row_stays_singleton(client, auth_headers, container):
    for limit in (1, 2, 3):
        client.post("/api/settings", headers=auth_headers,
                    json={"data_limit_gb": limit, "alerts_enabled": True})

    rows = container.get("database").execute_query("SELECT COUNT(*) as count FROM settings")
    assert rows[0]["count"] == 1


@pytest.mark.parametrize("body,field", [
    ({"alerts_enabled": True}, "data_limit_gb"),
    ({"data_limit_gb": 10}, "alerts_enabled"),
    ({"data_limit_gb": "lots", "alerts_enabled": True}, "data_limit_gb"),
    ({"data_limit_gb": -1, "alerts_enabled": True}, "data_limit_gb"),
    ({"data_limit_gb": "inf", "alerts_enabled": True}, "data_limit_gb"),
    ({"data_limit_gb": "nan", "alerts_enabled": True}, "data_limit_gb"),
    ({"data_limit_gb": 1e999, "alerts_enabled": True}, "data_limit_gb"),
    ({"data_limit_gb": 10, "alerts_enabled": "yes"}, "alerts_enabled"),
])
def test_invalid_settings_rejected(client, auth_headers, body, field):
    response = client.post("/api/settings", headers=auth_headers, json=body)
    assert response.status_code == 400
    assert response.get_json()["field"] == field

    # Nothing was written
    assert client.get("/api/settings", headers=auth_headers).get_json()["data_limit_gb"] == 100.0


def test_rejected_infinite_limit_keeps_summary_working(client, auth_headers):
    response = client.post("/api/settings", headers=auth_headers,
                           json={"data_limit_gb": "inf", "alerts_enabled": True})
    assert response.status_code == 400

    summary = client.get("/api/traffic/summary", headers=auth_headers)
    assert summary.status_code == 200
