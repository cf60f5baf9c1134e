from marquee import __version__


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["api_version"] == __version__


def test_security_headers(client):
    response = client.get("/")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert "image.tmdb.org" in response.headers["Content-Security-Policy"]


def test_unknown_route_is_404(client):
    assert client.get("/api/nothing-here").status_code == 404
