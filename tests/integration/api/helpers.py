from fastapi.testclient import TestClient


def upload(client: TestClient, name: str, content: bytes, field: str = "myFile"):
    return client.post("/upload", files={field: (name, content, "application/octet-stream")})
