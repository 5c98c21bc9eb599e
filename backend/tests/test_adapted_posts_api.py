"""
Tests for saved platform adaptations.
"""

ADAPTED_POST = {
    "sourceContent": "We closed our seed round this week. Here is what we learned.",
    "platform": "twitter",
    "adaptedContent": "Seed round closed! What we learned 🧵",
    "characterCount": 37,
    "changes": ["Shortened for twitter"],
    "language": "english",
}


class TestAdaptedPosts:
    def test_save_and_list(self, client, fake_supabase):
        response = client.post("/api/v1/adapted-posts", json=ADAPTED_POST)

        assert response.status_code == 201
        post = response.json()["post"]
        assert post["platform"] == "twitter"
        assert post["adaptedContent"] == "Seed round closed! What we learned 🧵"
        assert post["changes"] == ["Shortened for twitter"]
        assert "createdAt" in post

        row = fake_supabase.tables["adapted_posts"][0]
        assert row["source_content"] == ADAPTED_POST["sourceContent"]
        assert row["character_count"] == 37

        listed = client.get("/api/v1/adapted-posts").json()
        assert [item["id"] for item in listed["posts"]] == [post["id"]]

    def test_defaults_for_count_and_changes(self, client):
        body = {key: ADAPTED_POST[key] for key in ("sourceContent", "platform", "adaptedContent", "language")}

        post = client.post("/api/v1/adapted-posts", json=body).json()["post"]

        assert post["characterCount"] == len(ADAPTED_POST["adaptedContent"])
        assert post["changes"] == []

    def test_list_newest_first(self, client, fake_supabase):
        for created_at, platform in [("2026-10-01T09:00:00+00:00", "facebook"), ("2026-10-03T09:00:00+00:00", "medium")]:
            fake_supabase.add_row("adapted_posts", {
                "source_content": "source",
                "platform": platform,
                "adapted_content": "adapted",
                "character_count": 7,
                "changes": [],
                "language": "kurdish",
                "created_at": created_at,
            })

        posts = client.get("/api/v1/adapted-posts").json()["posts"]

        assert [post["platform"] for post in posts] == ["medium", "facebook"]

    def test_missing_fields(self, client):
        response = client.post("/api/v1/adapted-posts", json={"platform": "twitter"})
        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required parameters: sourceContent, adaptedContent, language"
        }

    def test_invalid_platform(self, client):
        response = client.post("/api/v1/adapted-posts", json={**ADAPTED_POST, "platform": "snapchat"})
        assert response.status_code == 400

    def test_empty_adapted_content(self, client, fake_supabase):
        response = client.post("/api/v1/adapted-posts", json={**ADAPTED_POST, "adaptedContent": ""})
        assert response.status_code == 400
        assert fake_supabase.tables.get("adapted_posts", []) == []

    def test_delete(self, client):
        post_id = client.post("/api/v1/adapted-posts", json=ADAPTED_POST).json()["post"]["id"]

        response = client.delete("/api/v1/adapted-posts", params={"id": post_id})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/api/v1/adapted-posts").json() == {"posts": []}

    def test_delete_requires_id(self, client):
        response = client.delete("/api/v1/adapted-posts")
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required parameter: id"}

    def test_delete_missing(self, client):
        response = client.delete("/api/v1/adapted-posts", params={"id": 5})
        assert response.status_code == 404
        assert response.json() == {"error": "Adapted post not found"}

    def test_storage_failure_is_sanitized(self, client, fake_supabase):
        fake_supabase.fail_with = TimeoutError("statement timeout")
        response = client.get("/api/v1/adapted-posts")
        assert response.status_code == 500
        assert response.json() == {"error": "Database connection error. Please try again."}
