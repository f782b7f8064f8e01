"""App-level routes and request logging."""

import logging


async def test_health_and_root(anon_client):
    health = await anon_client.get("/health")
    root = await anon_client.get("/")
    
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert root.json()["docs"] == "/docs"


async def test_every_response_carries_request_id(anon_client):
    generated = await anon_client.get("/health")
    echoed = await anon_client.get("/api/clients", headers={"X-Request-ID": "trace-42"})
    
    assert len(generated.headers["X-Request-ID"]) == 12
    assert echoed.status_code == 401
    assert echoed.headers["X-Request-ID"] == "trace-42"


async def test_access_line_is_logged(anon_client):
    lines = []
    
    class Collector(logging.Handler):
        def emit(self, record):
            lines.append(record.getMessage())
    
    handler = Collector()
    access = logging.getLogger("visapilot.access")
    access.addHandler(handler)
    try:
        await anon_client.get("/health", headers={"X-Request-ID": "abc"})
    finally:
        access.removeHandler(handler)
    
    assert len(lines) == 1
    assert lines[0].startswith("GET /health -> 200")
    assert lines[0].endswith("request_id=abc")
