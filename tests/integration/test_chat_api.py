"""End-to-end flow through the chat panel API with the chat endpoint mocked via respx."""

import json

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from sdk_util_generator.infrastructure.entrypoints.api import create_app

API_URL = "https://agent.example.com/api/v1/chat/completions"
CODE_REPLY = "```python\nimport stripe\n\n\ndef create_charge(amount):\n    return amount\n```"


def _reply(content: str | None) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})


@pytest.fixture
def client(settings) -> TestClient:
    return TestClient(create_app(settings))


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_chat_panel_page(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "<title>TestSdkGenerator</title>" in response.text
    assert "/api/v1/chat/messages/stream" in response.text


def test_generate_stripe_util_end_to_end(client: TestClient, workspace) -> None:
    (workspace / "app.py").write_text("from flask import Flask\napp = Flask(__name__)\n")
    (workspace / "node_modules").mkdir()
    (workspace / "node_modules" / "ignored.js").write_text("module.exports = 1;\n")

    with respx.mock(assert_all_called=True) as router:
        route = router.post(API_URL).mock(
            side_effect=[_reply(CODE_REPLY), _reply("## Step 1\nImport stripe_util in app.py")]
        )
        response = client.post("/api/v1/chat/messages", json={"text": "generate stripe util"})

    assert response.status_code == 200
    turns = response.json()["turns"]
    assert [t["kind"] for t in turns] == ["progress", "progress", "progress", "result"]
    assert turns[0]["text"] == "🔄 Step 1/3: Generating SDK utility code..."

    target = workspace / "utils" / "stripe_util.py"
    assert target.read_text(encoding="utf-8").startswith("import stripe")
    result = turns[-1]["text"]
    assert f"✅ Successfully created: {target}" in result
    assert "📚 HOW TO INTEGRATE:" in result
    assert "📊 Analyzed 2 files from your workspace for context." in result

    integration_prompt = route.calls[1].request.content.decode("utf-8")
    assert "ignored.js" not in integration_prompt
    assert "app.py" in integration_prompt


def test_transport_error_becomes_error_turn(client: TestClient, workspace) -> None:
    with respx.mock() as router:
        router.post(API_URL).mock(side_effect=httpx.ConnectError("connection refused"))
        response = client.post("/api/v1/chat/messages", json={"text": "generate stripe util"})

    turns = response.json()["turns"]
    assert turns[-1]["kind"] == "error"
    assert turns[-1]["text"].startswith("❌ Error: Failed to create SDK file:")
    assert not (workspace / "utils").exists()


def test_integration_timeout_still_reports_success(client: TestClient, workspace) -> None:
    with respx.mock() as router:
        router.post(API_URL).mock(
            side_effect=[_reply(CODE_REPLY), httpx.ReadTimeout("timed out")]
        )
        response = client.post("/api/v1/chat/messages", json={"text": "generate stripe util"})

    result = response.json()["turns"][-1]
    assert result["kind"] == "result"
    assert "📄 File created successfully!" in result["text"]
    assert "⏱️ Integration instruction request timed out." in result["text"]
    assert (workspace / "utils" / "stripe_util.py").exists()


def test_empty_message_is_rejected(client: TestClient) -> None:
    response = client.post("/api/v1/chat/messages", json={"text": ""})

    assert response.status_code == 422


def _sse_turns(body: str) -> list[dict]:
    turns = []
    for block in body.split("\n\n"):
        lines = block.strip().splitlines()
        if not lines:
            continue
        assert lines[0] == "event: turn"
        turns.append(json.loads(lines[1].removeprefix("data: ")))
    return turns


def test_stream_emits_progress_turns_then_result(client: TestClient, workspace) -> None:
    (workspace / "app.py").write_text("import os\n")

    with respx.mock(assert_all_called=True) as router:
        router.post(API_URL).mock(
            side_effect=[_reply(CODE_REPLY), _reply("Call stripe_util from app.py")]
        )
        response = client.post(
            "/api/v1/chat/messages/stream", json={"text": "generate stripe util"}
        )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    turns = _sse_turns(response.text)
    assert [t["kind"] for t in turns] == ["progress", "progress", "progress", "result"]
    assert turns[2]["text"] == "🔄 Step 3/3: Getting detailed integration instructions..."
    assert "📚 HOW TO INTEGRATE:\n\nCall stripe_util from app.py" in turns[-1]["text"]


def test_stream_reports_failure_as_final_error_turn(client: TestClient, workspace) -> None:
    with respx.mock() as router:
        router.post(API_URL).mock(side_effect=httpx.ConnectError("connection refused"))
        response = client.post(
            "/api/v1/chat/messages/stream", json={"text": "generate stripe util"}
        )

    turns = _sse_turns(response.text)
    assert [t["kind"] for t in turns] == ["progress", "progress", "progress", "error"]
    assert turns[-1]["text"].startswith("❌ Error: Failed to create SDK file:")


def test_stream_rejects_empty_message(client: TestClient) -> None:
    response = client.post("/api/v1/chat/messages/stream", json={"text": ""})

    assert response.status_code == 422
