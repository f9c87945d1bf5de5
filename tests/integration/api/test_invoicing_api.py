"""Integration tests for the invoicing HTTP API"""

import pytest
from decimal import Decimal
from httpx import AsyncClient


async def create_customer(client: AsyncClient, name="Ana", **fields):
    response = await client.post("/api/catalog/customers", json={"name": name, **fields})
    assert response.status_code == 201
    return response.json()


async def create_item(client: AsyncClient, name="Cadena", price="10.00"):
    response = await client.post("/api/catalog/items", json={"name": name, "price": price})
    assert response.status_code == 201
    return response.json()


async def create_line(client: AsyncClient, customer_id, item_id, **fields):
    payload = {"customer_id": customer_id, "item_id": item_id, **fields}
    response = await client.post("/api/work-lines", json=payload)
    assert response.status_code == 201
    return response.json()


class TestCatalogAPIIntegration:
    @pytest.mark.asyncio
    async def test_customer_crud(self, client: AsyncClient):
        customer = await create_customer(client, name="  Ana  ", city="Logroño", tax_id="")

        assert customer["name"] == "Ana"
        assert customer["tax_id"] is None

        response = await client.patch(
            f"/api/catalog/customers/{customer['customer_id']}", json={"phone": "941000000"}
        )
        assert response.status_code == 200
        assert response.json()["phone"] == "941000000"
        assert response.json()["city"] == "Logroño"

        response = await client.get("/api/catalog/customers")
        assert [c["name"] for c in response.json()] == ["Ana"]

        response = await client.delete(f"/api/catalog/customers/{customer['customer_id']}")
        assert response.status_code == 204

        response = await client.get(f"/api/catalog/customers/{customer['customer_id']}")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CUSTOMER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, client: AsyncClient):
        response = await client.post("/api/catalog/customers", json={"name": "   "})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_negative_price_rejected(self, client: AsyncClient):
        response = await client.post("/api/catalog/items", json={"name": "X", "price": "-1"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_delete_in_use(self, client: AsyncClient):
        customer = await create_customer(client)
        item = await create_item(client)
        await create_line(client, customer["customer_id"], item["item_id"])

        response = await client.delete(f"/api/catalog/customers/{customer['customer_id']}")
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CUSTOMER_IN_USE"

        response = await client.delete(f"/api/catalog/items/{item['item_id']}")
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "ITEM_IN_USE"


class TestWorkLineAPIIntegration:
    @pytest.mark.asyncio
    async def test_create_uses_item_price(self, client: AsyncClient):
        customer = await create_customer(client)
        item = await create_item(client, price="12.00")

        line = await create_line(
            client, customer["customer_id"], item["item_id"], qty="2", work_date="2025-03-01"
        )

        assert Decimal(line["price"]) == Decimal("12.00")
        assert Decimal(line["amount"]) == Decimal("24.00")
        assert line["invoiced"] is False

    @pytest.mark.asyncio
    async def test_unknown_item(self, client: AsyncClient):
        customer = await create_customer(client)

        response = await client.post(
            "/api/work-lines", json={"customer_id": customer["customer_id"], "item_id": 999}
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ITEM_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_filters_and_order(self, client: AsyncClient):
        customer = await create_customer(client)
        item = await create_item(client)
        late = await create_line(client, customer["customer_id"], item["item_id"], work_date="2025-03-05")
        early = await create_line(client, customer["customer_id"], item["item_id"], work_date="2025-03-01")

        response = await client.get(
            "/api/work-lines", params={"customer_id": customer["customer_id"], "invoiced": "false"}
        )

        assert response.status_code == 200
        data = response.json()
        assert [line["line_id"] for line in data["lines"]] == [early["line_id"], late["line_id"]]
        assert Decimal(data["pending_total"]) == Decimal("20.00")


class TestInvoicingAPIIntegration:
    @pytest.mark.asyncio
    async def test_issue_print_and_reverse(self, client: AsyncClient):
        customer = await create_customer(client, postal_code="26001", city="Logroño")
        chain = await create_item(client, name="Cadena", price="10.00")
        grease = await create_item(client, name="Engrase", price="5.50")
        first = await create_line(
            client, customer["customer_id"], chain["item_id"], qty="2", work_date="2025-03-01"
        )
        second = await create_line(
            client, customer["customer_id"], grease["item_id"], work_date="2025-03-02"
        )

        response = await client.get("/api/invoicing/pending")
        assert response.status_code == 200
        assert Decimal(response.json()["pending_total"]) == Decimal("25.50")

        response = await client.post(
            "/api/invoicing/invoices",
            json={"customer_id": customer["customer_id"], "render_pdf": True},
        )
        assert response.status_code == 201
        invoice = response.json()
        assert Decimal(invoice["total"]) == Decimal("25.50")
        assert invoice["number"].endswith("-0001")
        assert invoice["pdf_base64"]
        assert [line["line_id"] for line in invoice["lines"]] == [first["line_id"], second["line_id"]]

        # Invoiced lines are read-only
        response = await client.patch(f"/api/work-lines/{first['line_id']}", json={"qty": "5"})
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "WORK_LINE_INVOICED"

        response = await client.get(f"/api/invoicing/invoices/{invoice['invoice_id']}")
        assert response.status_code == 200
        assert len(response.json()["lines"]) == 2

        response = await client.get(f"/api/invoicing/invoices/{invoice['invoice_id']}/pdf")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")
        assert invoice["number"] in response.headers["content-disposition"]

        response = await client.get("/api/invoicing/pending")
        assert response.json()["customers"] == []

        response = await client.delete(f"/api/invoicing/invoices/{invoice['invoice_id']}")
        assert response.status_code == 200
        assert sorted(response.json()["released_line_ids"]) == sorted(
            [first["line_id"], second["line_id"]]
        )

        response = await client.get("/api/invoicing/invoices")
        assert response.json() == []

        response = await client.get(
            "/api/work-lines", params={"customer_id": customer["customer_id"]}
        )
        assert all(not line["invoiced"] for line in response.json()["lines"])

    @pytest.mark.asyncio
    async def test_issue_with_nothing_pending(self, client: AsyncClient):
        customer = await create_customer(client)

        response = await client.post(
            "/api/invoicing/invoices", json={"customer_id": customer["customer_id"]}
        )

        assert response.status_code == 204
        response = await client.get("/api/invoicing/invoices")
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_issue_unknown_customer(self, client: AsyncClient):
        response = await client.post("/api/invoicing/invoices", json={"customer_id": 999})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CUSTOMER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_missing_invoice(self, client: AsyncClient):
        response = await client.delete("/api/invoicing/invoices/999")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

        response = await client.get("/api/invoicing/invoices/999/pdf")
        assert response.status_code == 404
