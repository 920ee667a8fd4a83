from employee_api.api.routes.greeting import GREETING


def test_greeting_returns_plain_text(client):
    response = client.get("/api/v1/greeting")

    assert response.status_code == 200
    assert response.text == "welcome to Spring Boot Application"
    assert response.headers["content-type"].startswith("text/plain")


def test_greeting_is_stable_across_requests(client):
    bodies = {client.get("/api/v1/greeting").text for _ in range(5)}
    assert bodies == {GREETING}


def test_greeting_ignores_query_parameters(client):
    response = client.get("/api/v1/greeting", params={"name": "ignored"})
    assert response.status_code == 200
    assert response.text == GREETING


def test_greeting_rejects_other_methods(client):
    assert client.post("/api/v1/greeting").status_code == 405
    assert client.delete("/api/v1/greeting").status_code == 405


def test_unknown_route_is_not_found(client):
    assert client.get("/api/v1/greetings").status_code == 404
    assert client.get("/greeting").status_code == 404


def test_greeting_is_documented_in_openapi(client):
    schema = client.get("/openapi.json").json()
    assert "get" in schema["paths"]["/api/v1/greeting"]
