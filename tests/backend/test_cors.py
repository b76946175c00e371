ALLOWED_ORIGIN = "http://localhost:8081"


def _preflight(client, origin, method="GET"):
    return client.options(
        "/api/profiles",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": method,
            "Access-Control-Request-Headers": "X-Custom-Header, Content-Type",
        },
    )


def test_preflight_from_allowed_origin(client):
    for method in ("GET", "POST", "PUT", "DELETE"):
        resp = _preflight(client, ALLOWED_ORIGIN, method)
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
        assert resp.headers["access-control-allow-credentials"] == "true"
        assert method in resp.headers["access-control-allow-methods"]


def test_preflight_allows_any_request_header(client):
    resp = _preflight(client, ALLOWED_ORIGIN, "POST")
    assert "X-Custom-Header" in resp.headers["access-control-allow-headers"]


def test_preflight_rejects_other_origin(client):
    resp = _preflight(client, "http://evil.example")
    assert resp.status_code == 400
    assert "access-control-allow-origin" not in resp.headers


def test_preflight_rejects_unlisted_method(client):
    resp = _preflight(client, ALLOWED_ORIGIN, "PATCH")
    assert resp.status_code == 400


def test_simple_request_from_allowed_origin(client):
    resp = client.get("/api/profiles", headers={"Origin": ALLOWED_ORIGIN})
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == ALLOWED_ORIGIN


def test_simple_request_from_other_origin_has_no_cors_header(client):
    resp = client.get("/api/profiles", headers={"Origin": "http://evil.example"})
    assert resp.status_code == 200
    assert "access-control-allow-origin" not in resp.headers
