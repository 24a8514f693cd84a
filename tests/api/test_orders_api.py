"""
HTTP tests for /orders and the status endpoints.
"""
import pytest

from salesapp.domain.constants.limits import MAX_QUANTITY


@pytest.fixture
def order_body(customer, shirt, mug):
    return {
        "person_id": customer.id,
        "payment_method": "Card",
        "items": [
            {"product_id": shirt.id, "quantity": 1},
            {"product_id": mug.id, "quantity": 1},
            {"product_id": shirt.id, "quantity": 1},
        ],
    }


# ══════════════════════════════════════════════════════════════
# CREATION
# ══════════════════════════════════════════════════════════════

class TestCreateOrderApi:
    def test_created_with_merged_items(self, client, order_body):
        response = client.post("/orders", json=order_body)

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "Pending"
        assert body["payment_method"] == "Card"
        assert [(i["product_name"], i["quantity"]) for i in body["items"]] == [("Camiseta", 2), ("Caneca", 1)]
        assert body["items"][0]["subtotal"] == 119.8
        assert body["total"] == 149.3

    def test_payment_method_defaults_to_cash(self, client, order_body):
        del order_body["payment_method"]
        assert client.post("/orders", json=order_body).json()["payment_method"] == "Cash"

    def test_empty_items_is_bad_request(self, client, order_body):
        order_body["items"] = []
        assert client.post("/orders", json=order_body).status_code == 400

    def test_zero_quantity_is_bad_request(self, client, order_body):
        order_body["items"][0]["quantity"] = 0
        assert client.post("/orders", json=order_body).status_code == 400

    def test_unknown_payment_method_is_bad_request(self, client, order_body):
        order_body["payment_method"] = "Pix"
        assert client.post("/orders", json=order_body).status_code == 400

    def test_unknown_product_is_not_found(self, client, order_body):
        order_body["items"].append({"product_id": 999, "quantity": 1})
        response = client.post("/orders", json=order_body)
        assert response.status_code == 404
        assert response.json() == {"detail": "One or more products were not found"}
        assert client.get("/orders").json() == []

    def test_unknown_person_is_not_found(self, client, order_body):
        order_body["person_id"] = 999
        assert client.post("/orders", json=order_body).status_code == 404


# ══════════════════════════════════════════════════════════════
# LIFECYCLE
# ══════════════════════════════════════════════════════════════

class TestOrderLifecycleApi:
    @pytest.fixture
    def order_id(self, client, order_body):
        return client.post("/orders", json=order_body).json()["id"]

    def test_full_sequence(self, client, order_id):
        assert client.post(f"/orders/{order_id}/mark-paid").json()["status"] == "Paid"
        assert client.post(f"/orders/{order_id}/mark-shipped").json()["status"] == "Shipped"
        assert client.post(f"/orders/{order_id}/mark-received").json()["status"] == "Received"
        assert client.get(f"/orders/{order_id}").json()["status"] == "Received"

    def test_skipping_a_step_is_conflict(self, client, order_id):
        response = client.post(f"/orders/{order_id}/mark-shipped")
        assert response.status_code == 409
        assert response.json() == {"detail": "Only paid orders can be shipped"}

    def test_paying_twice_is_conflict(self, client, order_id):
        client.post(f"/orders/{order_id}/mark-paid")
        response = client.post(f"/orders/{order_id}/mark-paid")
        assert response.status_code == 409
        assert response.json() == {"detail": "Only pending orders can be marked as paid"}

    def test_unknown_order_is_not_found(self, client):
        assert client.post("/orders/999/mark-paid").status_code == 404
        assert client.get("/orders/999").status_code == 404

    def test_list_filtered_by_status(self, client, order_body, order_id):
        second = client.post("/orders", json=order_body).json()["id"]
        client.post(f"/orders/{second}/mark-paid")

        assert [o["id"] for o in client.get("/orders", params={"status": "Paid"}).json()] == [second]
        assert [o["id"] for o in client.get("/orders", params={"status": "Pending"}).json()] == [order_id]
        assert client.get("/orders", params={"status": "Lost"}).status_code == 400


# ══════════════════════════════════════════════════════════════
# NUMERIC BOUNDS
# ══════════════════════════════════════════════════════════════

class TestOrderBoundsApi:
    def test_person_id_beyond_64_bits_is_bad_request(self, client, order_body):
        order_body["person_id"] = 2**63
        assert client.post("/orders", json=order_body).status_code == 400

    def test_product_id_beyond_64_bits_is_bad_request(self, client, order_body):
        order_body["items"][0]["product_id"] = 10**19
        assert client.post("/orders", json=order_body).status_code == 400

    def test_quantity_beyond_limit_is_bad_request(self, client, order_body):
        order_body["items"][0]["quantity"] = MAX_QUANTITY + 1
        assert client.post("/orders", json=order_body).status_code == 400

    def test_merged_quantity_beyond_limit_is_bad_request(self, client, order_body):
        order_body["items"][0]["quantity"] = MAX_QUANTITY
        response = client.post("/orders", json=order_body)
        assert response.status_code == 400
        assert client.get("/orders").json() == []

    def test_path_and_query_ids_beyond_64_bits_are_bad_request(self, client):
        assert client.get(f"/orders/{2**63}").status_code == 400
        assert client.post(f"/orders/{2**63}/mark-paid").status_code == 400
        assert client.get("/orders", params={"person_id": 2**63}).status_code == 400
