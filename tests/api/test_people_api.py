"""
HTTP tests for /people.
"""
VALID_CPF = "11144477735"
OTHER_CPF = "98765432100"


def _create(client, name="Ana Maria", cpf=VALID_CPF, address="Rua A, 123"):
    return client.post("/people", json={"name": name, "cpf": cpf, "address": address})


class TestCreatePerson:
    def test_created(self, client):
        response = _create(client, cpf="111.444.777-35")
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["cpf"] == VALID_CPF
        assert body["address"] == "Rua A, 123"

    def test_invalid_cpf_is_bad_request(self, client):
        response = _create(client, cpf="111.444.777-36")
        assert response.status_code == 400
        assert isinstance(response.json()["detail"], list)

    def test_missing_name_is_bad_request(self, client):
        response = client.post("/people", json={"cpf": VALID_CPF})
        assert response.status_code == 400

    def test_duplicate_cpf_is_conflict(self, client):
        _create(client)
        response = _create(client, name="Other")
        assert response.status_code == 409
        assert response.json() == {"detail": "CPF already registered"}


class TestReadUpdateDeletePerson:
    def test_get_and_list(self, client):
        _create(client)
        _create(client, name="Carlos Silva", cpf=OTHER_CPF)

        assert client.get("/people/1").json()["name"] == "Ana Maria"
        assert [p["name"] for p in client.get("/people").json()] == ["Ana Maria", "Carlos Silva"]
        assert [p["name"] for p in client.get("/people", params={"name": "silva"}).json()] == ["Carlos Silva"]
        assert [p["id"] for p in client.get("/people", params={"cpf": "987.654.321-00"}).json()] == [2]

    def test_get_missing_is_not_found(self, client):
        response = client.get("/people/99")
        assert response.status_code == 404
        assert response.json() == {"detail": "Person not found"}

    def test_update(self, client):
        _create(client)
        response = client.put("/people/1", json={"name": "Ana M.", "cpf": VALID_CPF, "address": None})
        assert response.status_code == 200
        assert response.json()["name"] == "Ana M."
        assert response.json()["address"] is None

    def test_update_to_taken_cpf_is_conflict(self, client):
        _create(client)
        _create(client, name="Carlos Silva", cpf=OTHER_CPF)
        response = client.put("/people/1", json={"name": "Ana", "cpf": OTHER_CPF})
        assert response.status_code == 409

    def test_delete(self, client):
        _create(client)
        response = client.delete("/people/1")
        assert response.status_code == 204
        assert response.content == b""
        assert client.delete("/people/1").status_code == 404


class TestCpfInput:
    def test_non_ascii_digits_are_bad_request(self, client):
        _create(client)
        response = _create(client, name="Clone", cpf="١١١٤٤٤٧٧٧٣٥")
        assert response.status_code == 400
        assert len(client.get("/people").json()) == 1

    def test_cpf_filter_without_digits_matches_nobody(self, client):
        _create(client)
        _create(client, name="Carlos Silva", cpf=OTHER_CPF)
        assert client.get("/people", params={"cpf": "abc"}).json() == []

    def test_blank_cpf_filter_is_ignored(self, client):
        _create(client)
        assert len(client.get("/people", params={"cpf": "  "}).json()) == 1

    def test_id_beyond_64_bits_is_bad_request(self, client):
        assert client.get(f"/people/{2**63}").status_code == 400
