"""
Tests for the main application endpoints.
"""

def test_root_endpoint(client):
    """
    Test the root endpoint returns a welcome message.
    """
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "version" in data


def test_health_check(client):
    """
    Test the health check endpoint reports table sizes.
    """
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["records"] == {
        "patients": 0,
        "doctors": 0,
        "health_records": 0,
        "prescriptions": 0,
        "lab_tests": 0,
    }


def test_request_id_header(client):
    response = client.get("/")
    assert response.headers["X-Request-ID"]
    assert "X-Process-Time" in response.headers


def test_caller_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "req-42"})
    assert response.headers["X-Request-ID"] == "req-42"


def test_rejected_request_logged_as_warning(client, caplog):
    with caplog.at_level("INFO", logger="clinic_records.core.middleware"):
        response = client.get("/api/v1/patients/missing")
    assert response.status_code == 404
    records = [r for r in caplog.records if r.name == "clinic_records.core.middleware"]
    assert records
    assert records[-1].levelname == "WARNING"
    assert "-> 404" in records[-1].getMessage()
