def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_unknown_route(client):
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}
