"""
Tests for the HTTP endpoints.
"""

from fastapi.testclient import TestClient

from sentiment_api.main import app, limiter


class TestRoot:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"message": "Employee Sentiment API"}


# =============================================================
# TEST: Single response analysis
# =============================================================

class TestAnalyzeResponse:
    """POST /sentiment/"""

    def test_scores_response(self, client):
        response = client.post("/sentiment/", json={"content": "not good"})

        assert response.status_code == 200
        body = response.json()
        assert body["response"] == "not good"
        assert body["sentiment"] == {
            "score": -0.5,
            "label": "very negative",
            "confidence": 0.5,
            "details": {"positiveWords": 0, "negativeWords": 1, "totalWords": 2},
        }
        assert body["display"] == {"score": -0.5, "label": "Very Negative", "color": "#F44336"}

    def test_missing_content_is_neutral(self, client):
        response = client.post("/sentiment/", json={"content": None})

        assert response.status_code == 200
        sentiment = response.json()["sentiment"]
        assert sentiment == {"score": 0.0, "label": "neutral", "confidence": 0.0}
        assert "details" not in sentiment

    def test_wrong_content_type_is_rejected(self, client):
        response = client.post("/sentiment/", json={"content": ["good"]})

        assert response.status_code == 422


# =============================================================
# TEST: Summary, scale and Pareto
# =============================================================

class TestSummary:
    """POST /sentiment/summary/"""

    def test_summary(self, client):
        response = client.post(
            "/sentiment/summary/",
            json={"responses": ["very good", None, "not good", "The weather is nice today."]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total_responses"] == 3
        assert body["counts"]["very positive"] == 1
        assert body["counts"]["very negative"] == 1
        assert body["counts"]["neutral"] == 1
        assert body["average_label"] == "Very Positive"
        assert len(body["samples"]) == 3
        assert body["samples"][0]["text"] == "very good"


class TestScale:
    """GET /sentiment/scale/"""

    def test_boundary_is_neutral(self, client):
        response = client.get("/sentiment/scale/", params={"score": 0.03})

        assert response.status_code == 200
        assert response.json() == {"score": 0.03, "label": "Neutral", "color": "#9E9E9E"}

    def test_very_positive(self, client):
        response = client.get("/sentiment/scale/", params={"score": 0.5})

        assert response.json()["label"] == "Very Positive"
        assert response.json()["color"] == "#4CAF50"

    def test_invalid_score(self, client):
        assert client.get("/sentiment/scale/", params={"score": "high"}).status_code == 422
        assert client.get("/sentiment/scale/").status_code == 422


class TestPareto:
    """POST /pareto/"""

    def test_default_keywords(self, client):
        response = client.post("/pareto/", json={"responses": ["good good bad", None]})

        assert response.status_code == 200
        rows = response.json()
        assert [row["keyword"] for row in rows] == ["good", "bad", "improve", "issue", "problem"]
        assert rows[0]["count"] == 2
        assert rows[0]["percentage"] == 2 / 3 * 100

    def test_custom_keywords(self, client):
        response = client.post(
            "/pareto/", json={"responses": ["workload is high"], "keywords": ["workload"]}
        )

        assert response.json() == [
            {"keyword": "workload", "count": 1, "percentage": 100.0, "cumulativePercentage": 100.0}
        ]


# =============================================================
# TEST: CSV upload
# =============================================================

class TestUpload:
    """POST /upload/"""

    def test_analyzes_response_column(self, client):
        content = b"id,Response\n1,very good\n2,not good\n3,\n"
        response = client.post("/upload/", files={"file": ("survey.csv", content, "text/csv")})

        assert response.status_code == 200
        body = response.json()
        assert body["filename"] == "survey.csv"
        assert [row["response"] for row in body["results"]] == ["very good", "not good"]
        assert body["results"][0]["sentiment"]["label"] == "very positive"
        assert body["summary"]["total_responses"] == 2

    def test_falls_back_to_first_column(self, client):
        content = b"answer,id\nI feel overworked,1\n"
        response = client.post("/upload/", files={"file": ("survey.csv", content, "text/csv")})

        assert response.status_code == 200
        assert response.json()["results"][0]["response"] == "I feel overworked"

    def test_rejects_non_csv(self, client):
        response = client.post("/upload/", files={"file": ("survey.txt", b"good", "text/plain")})

        assert response.status_code == 400
        assert "CSV" in response.json()["detail"]

    def test_rejects_empty_csv(self, client):
        response = client.post("/upload/", files={"file": ("survey.csv", b"", "text/csv")})

        assert response.status_code == 400
        assert response.json()["detail"] == "Empty CSV file"

    def test_rejects_bad_encoding(self, client):
        response = client.post(
            "/upload/", files={"file": ("survey.csv", b"\xff\xfe\xfa", "text/csv")}
        )

        assert response.status_code == 400
        assert "encoding" in response.json()["detail"]


# =============================================================
# TEST: Rate limiting
# =============================================================

def test_upload_rate_limit():
    limiter.enabled = True
    limiter.reset()
    try:
        with TestClient(app) as client:
            statuses = [
                client.post(
                    "/upload/", files={"file": ("survey.txt", b"good", "text/plain")}
                ).status_code
                for _ in range(11)
            ]
    finally:
        limiter.reset()

    assert statuses[:10] == [400] * 10
    assert statuses[10] == 429
