"""
HTTP tests for /products.
"""


def _create(client, name="Camiseta", code="CAM-001", value=59.9):
    return client.post("/products", json={"name": name, "code": code, "value": value})


class TestProductsApi:
    def test_created(self, client):
        response = _create(client)
        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "Camiseta", "code": "CAM-001", "value": 59.9}

    def test_negative_value_is_bad_request(self, client):
        assert _create(client, value=-1).status_code == 400

    def test_blank_code_is_bad_request(self, client):
        assert _create(client, code="   ").status_code == 400

    def test_duplicate_code_is_conflict(self, client):
        _create(client)
        response = _create(client, name="Outra")
        assert response.status_code == 409
        assert response.json() == {"detail": "Code already registered"}

    def test_list_with_value_range(self, client):
        _create(client)
        _create(client, name="Caneca", code="CNC-010", value=29.5)

        response = client.get("/products", params={"min_value": "20", "max_value": "30"})
        assert response.status_code == 200
        assert [p["code"] for p in response.json()] == ["CNC-010"]

    def test_update_and_delete(self, client):
        _create(client)
        response = client.put("/products/1", json={"name": "Camiseta", "code": "CAM-001", "value": 49.9})
        assert response.status_code == 200
        assert response.json()["value"] == 49.9

        assert client.delete("/products/1").status_code == 204
        assert client.get("/products/1").status_code == 404
