"""
Tests for custom tone CRUD and industry preset seeding.
"""

import sys

from poststudio.db.presets import INDUSTRY_PRESETS


def create_tone(client, **overrides):
    body = {
        "name": "Founder voice",
        "descriptionEnglish": "direct and candid",
        "descriptionKurdish": "ڕاستەوخۆ و ڕوون",
    }
    body.update(overrides)
    return client.post("/api/v1/custom-tones", json=body)


class TestCreateCustomTone:
    def test_create(self, client, fake_supabase):
        response = create_tone(client, toneMix=[
            {"tone": "professional", "percentage": 70},
            {"tone": "comedy", "percentage": 30},
        ])

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Founder voice"
        assert data["isPreset"] is False
        assert data["toneMix"] == [
            {"tone": "professional", "percentage": 70.0},
            {"tone": "comedy", "percentage": 30.0},
        ]
        assert fake_supabase.tables["custom_tones"][0]["tone_mix"][0]["tone"] == "professional"

    def test_missing_descriptions(self, client):
        response = client.post("/api/v1/custom-tones", json={"name": "Only a name"})

        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required parameters: descriptionEnglish, descriptionKurdish"
        }

    def test_invalid_tone_mix(self, client, fake_supabase):
        response = create_tone(client, toneMix=[{"tone": "casual", "percentage": 50}])

        assert response.status_code == 400
        assert response.json() == {"error": "Tone mix percentages must sum to 100% (currently 50%)"}
        assert fake_supabase.tables.get("custom_tones", []) == []

    def test_storage_failure_is_sanitized(self, client, fake_supabase):
        fake_supabase.fail_with = RuntimeError('duplicate key value violates unique constraint "custom_tones_name_key"')
        response = create_tone(client)

        assert response.status_code == 500
        assert response.json() == {"error": "A record with this information already exists."}


class TestListCustomTones:
    def test_excludes_presets_by_default(self, client, fake_supabase):
        create_tone(client, name="Zeta")
        create_tone(client, name="Alpha")
        fake_supabase.add_row("custom_tones", {
            "name": "Tech Preset",
            "description_english": "x",
            "description_kurdish": "y",
            "industry": "technology",
            "is_preset": True,
        })

        names = [tone["name"] for tone in client.get("/api/v1/custom-tones").json()]
        assert names == ["Alpha", "Zeta"]

        with_presets = client.get("/api/v1/custom-tones", params={"includePresets": "true"}).json()
        assert len(with_presets) == 3

    def test_filter_presets_by_industry(self, client):
        client.put("/api/v1/custom-tones", params={"action": "seed"})

        response = client.get("/api/v1/custom-tones", params={"industry": "finance"})

        assert response.status_code == 200
        tones = response.json()
        assert len(tones) == 1
        assert tones[0]["industry"] == "finance"
        assert tones[0]["isPreset"] is True


class TestSeedPresets:
    def test_seed_is_idempotent(self, client, fake_supabase):
        first = client.put("/api/v1/custom-tones", params={"action": "seed"})
        second = client.put("/api/v1/custom-tones", params={"action": "seed"})

        assert first.status_code == 200
        assert first.json()["message"].startswith("Industry presets seeded successfully")
        assert second.status_code == 200
        assert len(fake_supabase.tables["custom_tones"]) == len(INDUSTRY_PRESETS)

    def test_invalid_action(self, client):
        response = client.put("/api/v1/custom-tones", params={"action": "wipe"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid action"}

    def test_presets_have_valid_mixes(self):
        industries = {preset["industry"] for preset in INDUSTRY_PRESETS}
        assert industries == {"technology", "finance", "healthcare", "marketing", "education", "startup"}
        for preset in INDUSTRY_PRESETS:
            assert abs(sum(mix["percentage"] for mix in preset["tone_mix"]) - 100) < 0.01

    def test_app_does_not_load_seed_script(self):
        import poststudio.main  # noqa: F401

        assert "poststudio.db.seed_presets" not in sys.modules


class TestSingleCustomTone:
    def test_get(self, client):
        tone_id = create_tone(client).json()["id"]

        response = client.get(f"/api/v1/custom-tones/{tone_id}")

        assert response.status_code == 200
        assert response.json()["descriptionEnglish"] == "direct and candid"

    def test_get_missing(self, client):
        response = client.get("/api/v1/custom-tones/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Custom tone not found"}

    def test_invalid_id(self, client):
        response = client.get("/api/v1/custom-tones/abc")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid tone ID"}

    def test_update(self, client):
        tone_id = create_tone(client).json()["id"]

        response = client.put(f"/api/v1/custom-tones/{tone_id}", json={"name": "Renamed"})

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        assert response.json()["descriptionEnglish"] == "direct and candid"

    def test_update_missing(self, client):
        response = client.put("/api/v1/custom-tones/42", json={"name": "Nope"})
        assert response.status_code == 404

    def test_update_requires_fields(self, client):
        tone_id = create_tone(client).json()["id"]
        response = client.put(f"/api/v1/custom-tones/{tone_id}", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "No fields to update"}

    def test_update_rejects_null_name(self, client):
        tone_id = create_tone(client).json()["id"]

        response = client.put(f"/api/v1/custom-tones/{tone_id}", json={"name": None})

        assert response.status_code == 400
        assert response.json() == {"error": "name cannot be null"}
        fetched = client.get(f"/api/v1/custom-tones/{tone_id}")
        assert fetched.status_code == 200
        assert fetched.json()["name"] == "Founder voice"

    def test_update_rejects_null_description(self, client):
        tone_id = create_tone(client).json()["id"]

        response = client.put(f"/api/v1/custom-tones/{tone_id}", json={"descriptionKurdish": None})

        assert response.status_code == 400
        assert response.json() == {"error": "descriptionKurdish cannot be null"}

    def test_update_can_clear_industry(self, client):
        tone_id = create_tone(client, industry="finance").json()["id"]

        response = client.put(f"/api/v1/custom-tones/{tone_id}", json={"industry": None})

        assert response.status_code == 200
        assert response.json()["industry"] is None

    def test_delete(self, client):
        tone_id = create_tone(client).json()["id"]

        response = client.delete(f"/api/v1/custom-tones/{tone_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Custom tone deleted successfully"}
        assert client.get(f"/api/v1/custom-tones/{tone_id}").status_code == 404

    def test_delete_missing(self, client):
        response = client.delete("/api/v1/custom-tones/7")
        assert response.status_code == 404
