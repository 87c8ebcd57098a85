def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_parse_chat_line(client):
    resp = client.post("/chat/parse", json={"line": "25/01/2025, 14:30 - Rahul: Bhai party kab hai? 😂"})
    assert resp.status_code == 200, resp.text
    assert resp.json() == {
        "date": "25/01/2025",
        "time": "14:30",
        "sender": "Rahul",
        "text": "Bhai party kab hai? 😂",
        "wordCount": 5,
        "sentiment": "funny",
    }


def test_parse_chat_line_rejects_malformed_line(client):
    resp = client.post("/chat/parse", json={"line": "just some text"})
    assert resp.status_code == 422
    assert resp.json()["detail"]["reason"] == "missing_sender_delimiter"


def test_parse_chat_line_rejects_non_text(client):
    resp = client.post("/chat/parse", json={"line": 12})
    assert resp.status_code == 422
    assert resp.json()["detail"]["reason"] == "not_text"

    missing = client.post("/chat/parse", json={})
    assert missing.status_code == 422
    assert missing.json()["detail"]["reason"] == "not_text"


def test_parse_chat_line_rejects_long_line(client):
    line = "25/01/2025, 14:30 - Rahul: " + "ha " * 100
    resp = client.post("/chat/parse", json={"line": line})
    assert resp.status_code == 422
    assert resp.json()["detail"]["reason"] == "line_too_long"


def test_create_report_card(client):
    resp = client.post("/report-cards", json={"name": "Priya", "marks": {"maths": 35, "science": 28}})
    assert resp.status_code == 200, resp.text
    assert resp.json() == {
        "name": "Priya",
        "totalMarks": 63,
        "percentage": 31.5,
        "grade": "F",
        "highestSubject": "maths",
        "lowestSubject": "science",
        "passedSubjects": [],
        "failedSubjects": ["maths", "science"],
        "subjectCount": 2,
    }


def test_create_report_card_rejects_bad_mark(client):
    resp = client.post("/report-cards", json={"name": "Rahul", "marks": {"maths": 85, "science": 120}})
    assert resp.status_code == 422
    assert resp.json()["detail"]["reason"] == "invalid_mark"


def test_create_report_card_rejects_non_record(client):
    resp = client.post("/report-cards", json=["Rahul"])
    assert resp.status_code == 422
    assert resp.json()["detail"]["reason"] == "not_a_record"


def test_openapi_documents_validation_failures(client):
    schema = client.get("/openapi.json").json()
    assert "422" in schema["paths"]["/chat/parse"]["post"]["responses"]
    assert "/report-cards" in schema["paths"]


def test_parse_chat_line_rejects_non_object_body(client):
    resp = client.post("/chat/parse", json="25/01/2025, 14:30 - Rahul: hi")
    assert resp.status_code == 422
    assert resp.json() == {
        "detail": {
            "reason": "not_an_object",
            "detail": 'Request body must be a JSON object like {"line": "..."}',
        }
    }


def test_create_report_card_uses_camel_case_fields(client):
    resp = client.post("/report-cards", json={"name": "Rahul", "marks": {"maths": 85, "science": 92, "english": 78}})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["totalMarks"] == 255
    assert body["percentage"] == 85
    assert body["grade"] == "A"
    assert body["highestSubject"] == "science"
    assert body["lowestSubject"] == "english"
    assert body["passedSubjects"] == ["maths", "science", "english"]
    assert "total_marks" not in body
