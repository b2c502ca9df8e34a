from fastapi.testclient import TestClient

from echoverse.app import create_app
from echoverse.generate import EchoDevClient

app = create_app(model_client=EchoDevClient())
client = TestClient(app)


class FailingClient:
    model = "broken"

    def generate(self, messages, params):
        raise ConnectionError("model offline")


def test_root_ok():
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()


def test_health_ok():
    for path in ("/health", "/api/health"):
        r = client.get(path)
        assert r.status_code == 200
        assert r.json()["status"] == "ok"


def test_healthz_reports_engine():
    r = client.get("/healthz")
    assert r.json()["engine"] == "EchoDevClient"


def test_chat_returns_response():
    r = client.post("/api/ai/chat", json={"message": "Hello"})
    assert r.status_code == 200
    assert r.json()["response"] == "[ECHO RESPONSE]\nHello"


def test_chat_requires_message():
    r = client.post("/api/ai/chat", json={})
    assert r.status_code == 400
    assert r.json() == {"error": "Message is required"}


def test_chat_model_failure_is_500():
    broken = TestClient(create_app(model_client=FailingClient()))
    r = broken.post("/api/ai/chat", json={"message": "Hello"})
    assert r.status_code == 500
    assert r.json()["error"].startswith("Failed to generate response")


def test_generate_saves_to_library():
    r = client.post("/api/ai/generate", json={"prompt": "Write about tea", "type": "blog", "context": "short"})
    assert r.status_code == 200
    data = r.json()
    assert data["content"].endswith("Write about tea")

    saved = client.get(f"/api/ai-contents/{data['id']}")
    assert saved.status_code == 200
    assert saved.json()["type"] == "blog"
    assert saved.json()["prompt"] == "Write about tea"

    listed = client.get("/api/ai-contents", params={"type": "blog"}).json()
    assert any(item["id"] == data["id"] for item in listed)


def test_generate_requires_prompt():
    r = client.post("/api/ai/generate", json={"prompt": ""})
    assert r.status_code == 400


def test_educational_needs_prompt_and_type():
    r = client.post("/api/ai/generate-educational", json={"prompt": "Fractions"})
    assert r.status_code == 400
    assert r.json() == {"error": "Prompt and type are required"}

    r = client.post("/api/ai/generate-educational", json={"prompt": "Fractions", "type": "quiz", "subject": "math"})
    assert r.status_code == 200
    assert "content" in r.json() and "id" in r.json()


def test_marketing_and_website():
    r = client.post("/api/ai/generate-marketing", json={"prompt": "Spring sale", "type": "email"})
    assert r.status_code == 200
    assert r.json()["content"].endswith("Spring sale")

    r = client.post("/api/ai/generate-website", json={"prompt": "Bakery in Lyon"})
    assert r.status_code == 200
    assert r.json()["code"].endswith("Bakery in Lyon")


def test_dev_generate():
    r = client.post("/api/dev/generate", json={"prompt": "reverse a list", "type": "code", "language": "python"})
    assert r.status_code == 200
    assert "reverse a list" in r.json()["result"]


def test_analyze_returns_json_object():
    r = client.post("/api/ai/analyze", json={"text": "I love this product!", "analysisType": "sentiment"})
    assert r.status_code == 200
    assert r.json()["engine"] == "echo"


def test_missing_content_is_404():
    r = client.get("/api/ai-contents/99999")
    assert r.status_code == 404


def test_tool_catalog():
    tools = client.get("/api/ai-tools").json()
    ids = [t["id"] for t in tools]
    assert ids == ["echowriter", "echobuilder", "echoseller", "echomarketer", "echoteacher", "echodevbot"]
    assert all(len(t["templates"]) == 3 for t in tools)


def test_register_ok():
    r = client.post(
        "/register",
        json={"username": "ada", "email": "ada@example.com", "password": "secret1", "confirmPassword": "secret1"},
    )
    assert r.status_code == 201
    assert r.json() == {"message": "User registered successfully!"}


def test_register_password_mismatch():
    r = client.post(
        "/register",
        json={"username": "ada", "email": "ada@example.com", "password": "secret1", "confirmPassword": "secret2"},
    )
    assert r.status_code == 400
    errors = r.json()["errors"]
    assert [e["loc"] for e in errors] == [["confirmPassword"]]


def test_login_validates_input():
    r = client.post("/api/auth/login", json={"email": "invalid", "password": "123"})
    assert r.status_code == 400
    fields = {e["loc"][-1] for e in r.json()["errors"]}
    assert fields == {"email", "password"}

    r = client.post("/login", json={"email": "ada@example.com", "password": "secret1"})
    assert r.status_code == 200


def test_lesson_remembers_preferences_per_user():
    fresh = TestClient(create_app(model_client=EchoDevClient()))
    body = {"topic": "Fractions", "gradeLevel": 4, "duration": 45, "learningStyle": "visual", "username": "ada"}

    first = fresh.post("/api/teacher/generate-lesson", json=body)
    assert first.status_code == 200
    text = first.json()["content"]
    assert "lesson plan for Fractions appropriate for grade 4, duration 45 minutes" in text
    assert "visual" in text
    assert "previous interactions" not in text

    second = fresh.post("/api/teacher/generate-lesson", json={**body, "topic": "Decimals"})
    assert "you prefer topic Fractions gradeLevel 4." in second.json()["content"]

    # someone else starts with a blank slate
    other = fresh.post("/api/teacher/generate-lesson", json={**body, "username": "bob"})
    assert "previous interactions" not in other.json()["content"]
    assert fresh.app.state.memory.retrieve("ada", "lesson_preferences") == [
        {"topic": "Fractions", "gradeLevel": 4},
        {"topic": "Decimals", "gradeLevel": 4},
    ]


def test_lesson_and_quiz_need_topic():
    for path in ("/api/teacher/generate-lesson", "/api/teacher/generate-quiz"):
        r = client.post(path, json={})
        assert r.status_code == 400
        assert r.json() == {"message": "Topic is required"}


def test_quiz_prompt():
    r = client.post("/api/teacher/generate-quiz", json={"topic": "volcanoes", "difficulty": "hard", "questionCount": 8})
    assert r.status_code == 200
    assert "Create a hard level quiz about volcanoes with 8 questions." in r.json()["content"]


def test_teacher_model_failure_is_500():
    broken = TestClient(create_app(model_client=FailingClient()))
    r = broken.post("/api/teacher/generate-lesson", json={"topic": "Fractions", "username": "ada"})
    assert r.status_code == 500
    assert r.json() == {"message": "Failed to generate lesson"}
    # nothing remembered for a failed lesson
    assert broken.app.state.memory.retrieve("ada", "lesson_preferences") == []

    r = broken.post("/api/teacher/generate-quiz", json={"topic": "Fractions"})
    assert r.json() == {"message": "Failed to generate quiz"}


def test_legacy_chat_shape():
    r = client.post(
        "/api/chat",
        json={"messages": [{"sender": "user", "text": "Hi"}, {"sender": "bot", "text": "Hello!"}, {"sender": "user", "text": "Help"}]},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["text"] == "[ECHO RESPONSE]\nHelp"
    assert data["sender"] == "assistant"
    assert data["id"].isdigit()
    assert "timestamp" in data


def test_legacy_chat_rejects_bad_messages():
    for body in ({}, {"messages": "Hi"}, {"messages": []}, {"messages": ["Hi"]}):
        r = client.post("/api/chat", json=body)
        assert r.status_code == 400
        assert r.json() == {"message": "Invalid messages format"}

    broken = TestClient(create_app(model_client=FailingClient()))
    r = broken.post("/api/chat", json={"messages": [{"sender": "user", "text": "Hi"}]})
    assert r.status_code == 500
    assert r.json() == {"message": "Failed to generate chat response"}


def test_legacy_generate_content_saves():
    r = client.post(
        "/api/generate-content",
        json={"prompt": "Tea ceremony", "type": "article", "context": "for beginners", "options": {"tone": "calm"}},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["success"] is True
    assert data["content"]["type"] == "article"
    assert data["content"]["content"].endswith("Tea ceremony")
    assert client.get(f"/api/ai-contents/{data['content']['id']}").status_code == 200

    untyped = client.post("/api/generate-content", json={"prompt": "Anything"}).json()
    assert untyped["content"]["type"] == "general"

    r = client.post("/api/generate-content", json={"type": "article"})
    assert r.status_code == 400
    assert r.json() == {"message": "Prompt is required"}


def test_legacy_analyze_text():
    r = client.post("/api/analyze-text", json={"text": "Great service"})
    assert r.status_code == 200
    assert r.json()["engine"] == "echo"
    assert "Great service" in r.json()["input"]

    r = client.post("/api/analyze-text", json={})
    assert r.status_code == 400
    assert r.json() == {"message": "Text is required"}

    broken = TestClient(create_app(model_client=FailingClient()))
    r = broken.post("/api/analyze-text", json={"text": "Great service"})
    assert r.status_code == 500
    assert r.json() == {"message": "Failed to analyze text"}
