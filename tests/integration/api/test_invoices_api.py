"""Integration tests for Invoice and Company API endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient

from config import ApplicationConfig

API = ApplicationConfig.API_PREFIX


def _payload(seed_data, **overrides):
    products = seed_data["products"]
    payload = {
        "company_id": seed_data["company"].id,
        "customer_id": seed_data["customer"].id,
        "issue_date": "2024-06-10",
        "status": "pending",
        "items": [
            {"product_id": products[0].id, "quantity": 2},
            {"product_id": products[1].id, "quantity": 1},
        ],
    }
    payload.update(overrides)
    return payload


class TestInvoicesAPIIntegration:
    """Integration test suite for Invoice API endpoints"""

    @pytest.mark.asyncio
    async def test_create_invoice_success(self, client: AsyncClient, seed_data):
        """POST /invoices with a complete invoice returns 201"""
        response = await client.post(f"{API}/invoices", json=_payload(seed_data))

        assert response.status_code == 201
        data = response.json()
        assert data["invoice_number"].startswith("INV")
        assert data["status"] == "pending"
        assert data["item_count"] == 2
        assert Decimal(data["total_amount"]) == Decimal("295.00")
        assert Decimal(data["gst_amount"]) == Decimal("45.00")
        assert Decimal(data["totals"]["subtotal"]) == Decimal("250.00")

    @pytest.mark.asyncio
    async def test_create_invoice_price_override(self, client: AsyncClient, seed_data):
        payload = _payload(seed_data)
        payload["items"][0]["price"] = "80.00"

        response = await client.post(f"{API}/invoices", json=payload)

        assert response.status_code == 201
        assert Decimal(response.json()["totals"]["subtotal"]) == Decimal("210.00")

    @pytest.mark.asyncio
    async def test_create_invoice_missing_customer(self, client: AsyncClient, seed_data):
        """POST /invoices without a customer returns 400 and stores nothing"""
        response = await client.post(f"{API}/invoices", json=_payload(seed_data, customer_id=None))

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert response.json()["error"]["message"] == "Please select a customer"

        listing = await client.get(f"{API}/invoices", params={"company_id": seed_data["company"].id})
        assert listing.json()["total_count"] == 0

    @pytest.mark.asyncio
    async def test_create_invoice_missing_product(self, client: AsyncClient, seed_data):
        payload = _payload(seed_data)
        payload["items"].append({"quantity": 1})

        response = await client.post(f"{API}/invoices", json=payload)

        assert response.status_code == 400
        assert "item 3" in response.json()["error"]["message"]

    @pytest.mark.asyncio
    async def test_create_invoice_zero_quantity(self, client: AsyncClient, seed_data):
        payload = _payload(seed_data)
        payload["items"][0]["quantity"] = 0

        response = await client.post(f"{API}/invoices", json=payload)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_invoice_unknown_company(self, client: AsyncClient, seed_data):
        response = await client.post(f"{API}/invoices", json=_payload(seed_data, company_id=999))

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "COMPANY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_preview_totals(self, client: AsyncClient, seed_data):
        """POST /invoices/preview computes totals for an incomplete draft"""
        payload = _payload(seed_data, customer_id=None)

        response = await client.post(f"{API}/invoices/preview", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert [Decimal(line["unit_price"]) for line in data["lines"]] == [
            Decimal("100.00"),
            Decimal("50.00"),
        ]
        assert Decimal(data["totals"]["grand_total"]) == Decimal("295.00")

    @pytest.mark.asyncio
    async def test_list_invoices_with_names(self, client: AsyncClient, seed_data):
        await client.post(f"{API}/invoices", json=_payload(seed_data))

        response = await client.get(f"{API}/invoices", params={"company_id": seed_data["company"].id})

        assert response.status_code == 200
        data = response.json()
        assert data["total_count"] == 1
        invoice = data["invoices"][0]
        assert invoice["customer_name"] == "Asha Enterprises"
        assert [item["product_name"] for item in invoice["items"]] == ["Steel bracket", "Hinge set"]

    @pytest.mark.asyncio
    async def test_download_pdf(self, client: AsyncClient, seed_data):
        """GET /invoices/{id}/pdf returns invoice-<number>.pdf"""
        created = (await client.post(f"{API}/invoices", json=_payload(seed_data))).json()

        response = await client.get(f"{API}/invoices/{created['invoice_id']}/pdf")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert f"invoice-{created['invoice_number']}.pdf" in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    @pytest.mark.asyncio
    async def test_download_pdf_not_found(self, client: AsyncClient, seed_data):
        response = await client.get(f"{API}/invoices/999/pdf")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_invoice(self, client: AsyncClient, seed_data):
        created = (await client.post(f"{API}/invoices", json=_payload(seed_data))).json()

        response = await client.delete(f"{API}/invoices/{created['invoice_id']}")

        assert response.status_code == 200
        assert response.json()["deleted_items"] == 2

        again = await client.delete(f"{API}/invoices/{created['invoice_id']}")
        assert again.status_code == 404

    @pytest.mark.asyncio
    async def test_create_invoice_rejects_sub_cent_price(self, client: AsyncClient, seed_data):
        """POST /invoices with a price below one paisa precision returns 422"""
        payload = _payload(seed_data)
        payload["items"][0]["price"] = "0.333"

        response = await client.post(f"{API}/invoices", json=payload)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_line_amounts_add_up_to_header(self, client: AsyncClient, seed_data):
        """
        Given: Two lines priced in paise
        When: The invoice is created and listed
        Then: Item amounts sum exactly to total minus GST
        """
        payload = _payload(seed_data)
        payload["items"] = [
            {"product_id": seed_data["products"][0].id, "quantity": 3, "price": "0.33"},
            {"product_id": seed_data["products"][1].id, "quantity": 7, "price": "12.49"},
        ]

        created = await client.post(f"{API}/invoices", json=payload)
        assert created.status_code == 201

        listing = await client.get(f"{API}/invoices", params={"company_id": seed_data["company"].id})
        invoice = listing.json()["invoices"][0]
        items_sum = sum(Decimal(item["amount"]) for item in invoice["items"])

        assert items_sum == Decimal("88.42")
        assert items_sum == Decimal(invoice["total_amount"]) - Decimal(invoice["gst_amount"])

    @pytest.mark.asyncio
    async def test_invoice_summary(self, client: AsyncClient, seed_data):
        """GET /invoices/summary reports sales, pending payments and recent invoices"""
        company_id = seed_data["company"].id
        await client.post(f"{API}/invoices", json=_payload(seed_data))
        await client.post(f"{API}/invoices", json=_payload(seed_data, status="paid"))

        response = await client.get(f"{API}/invoices/summary", params={"company_id": company_id})

        assert response.status_code == 200
        data = response.json()
        assert data["company_id"] == company_id
        assert data["invoice_count"] == 2
        assert Decimal(data["total_sales"]) == Decimal("590.00")
        assert Decimal(data["pending_total"]) == Decimal("295.00")
        assert [invoice["status"] for invoice in data["recent_invoices"]] == ["paid", "pending"]

    @pytest.mark.asyncio
    async def test_invoice_summary_limit(self, client: AsyncClient, seed_data):
        await client.post(f"{API}/invoices", json=_payload(seed_data))
        await client.post(f"{API}/invoices", json=_payload(seed_data))

        response = await client.get(
            f"{API}/invoices/summary",
            params={"company_id": seed_data["company"].id, "limit": 1},
        )

        assert response.status_code == 200
        assert response.json()["invoice_count"] == 2
        assert len(response.json()["recent_invoices"]) == 1

        invalid = await client.get(f"{API}/invoices/summary", params={"limit": 0})
        assert invalid.status_code == 422


class TestCompanySettingsAPIIntegration:
    @pytest.mark.asyncio
    async def test_get_settings(self, client: AsyncClient, seed_data):
        response = await client.get(f"{API}/companies/{seed_data['company'].id}/settings")

        assert response.status_code == 200
        assert response.json()["name"] == "Sharma Traders"
        assert Decimal(response.json()["gst_rate"]) == Decimal("18.00")

    @pytest.mark.asyncio
    async def test_get_settings_not_found(self, client: AsyncClient, seed_data):
        response = await client.get(f"{API}/companies/999/settings")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_new_gst_rate_applies_to_new_invoices(self, client: AsyncClient, seed_data):
        """
        Given: GST rate is changed to 5%
        When: An invoice is created afterwards
        Then: GST is charged at 5%
        """
        company_id = seed_data["company"].id

        patched = await client.patch(
            f"{API}/companies/{company_id}/settings", json={"gst_rate": "5.00"}
        )
        assert patched.status_code == 200
        assert patched.json()["name"] == "Sharma Traders"

        response = await client.post(f"{API}/invoices", json=_payload(seed_data))

        assert response.status_code == 201
        assert Decimal(response.json()["gst_amount"]) == Decimal("12.50")
        assert Decimal(response.json()["total_amount"]) == Decimal("262.50")

    @pytest.mark.asyncio
    async def test_invalid_gst_rate(self, client: AsyncClient, seed_data):
        response = await client.patch(
            f"{API}/companies/{seed_data['company'].id}/settings", json={"gst_rate": "150"}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_null_setting_is_rejected(self, client: AsyncClient, seed_data):
        """
        Given: A PATCH that sets gst_rate to null
        When: The request is validated
        Then: 422 is returned and the stored rate is unchanged
        """
        company_id = seed_data["company"].id

        response = await client.patch(
            f"{API}/companies/{company_id}/settings", json={"gst_rate": None}
        )

        assert response.status_code == 422

        settings = await client.get(f"{API}/companies/{company_id}/settings")
        assert Decimal(settings.json()["gst_rate"]) == Decimal("18.00")
