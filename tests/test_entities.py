"""
Teams, projects and tags share one generic create/list implementation.
"""
import pytest

ENTITY_PATHS = ["/teams", "/projects", "/tags"]


@pytest.mark.parametrize("path", ENTITY_PATHS)
class TestNamedEntities:

    def test_create_and_list(self, client, auth_headers, path):
        created = client.post(path, json={"name": "Alpha", "description": "first"}, headers=auth_headers)

        assert created.status_code == 201
        body = created.json()
        assert body["name"] == "Alpha"
        assert body["description"] == "first"
        assert "createdAt" in body

        listed = client.get(path, headers=auth_headers)
        assert listed.status_code == 200
        assert [item["id"] for item in listed.json()] == [body["id"]]

    def test_description_optional(self, client, auth_headers, path):
        response = client.post(path, json={"name": "Beta"}, headers=auth_headers)
        assert response.status_code == 201
        assert response.json()["description"] is None

    def test_empty_list_is_ok(self, client, auth_headers, path):
        response = client.get(path, headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == []

    def test_list_keeps_insertion_order(self, client, auth_headers, path):
        for name in ["one", "two", "three"]:
            client.post(path, json={"name": name}, headers=auth_headers)

        names = [item["name"] for item in client.get(path, headers=auth_headers).json()]
        assert names == ["one", "two", "three"]

    @pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": "x", "owner": 1}])
    def test_invalid_payload_rejected(self, client, auth_headers, path, payload):
        response = client.post(path, json=payload, headers=auth_headers)
        assert response.status_code == 400

    def test_requires_auth_by_default(self, client, path):
        assert client.get(path).status_code == 401
        assert client.post(path, json={"name": "x"}).status_code == 401
