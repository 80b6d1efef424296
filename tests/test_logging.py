import logging
from decimal import Decimal

import pytest

from config.settings import mask_sensitive_data
from modules.products.models import Product


class TestSensitiveDataMasking:
    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_api_key_masked_in_log_output(self):
        event_dict = {"event": "test", "query": "api_key: k-987"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "k-987" not in result["query"]

    def test_non_string_values_untouched(self):
        event_dict = {"event": "product.saved", "product_id": 7}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["product_id"] == 7

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "product.saved", "name": "Widget"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["name"] == "Widget"
        assert result["event"] == "product.saved"


@pytest.mark.django_db
class TestProductLogging:
    def test_creation_logged_with_product_id(self, caplog):
        with caplog.at_level(logging.INFO):
            product = Product.objects.create(name="Logged", price=Decimal("1.00"))

        messages = [record.getMessage() for record in caplog.records]
        assert any("product_created" in m and str(product.id) in m for m in messages)

    def test_update_not_logged_as_creation(self, caplog):
        product = Product.objects.create(name="Logged", price=Decimal("1.00"))
        product.name = "Renamed"
        caplog.clear()
        with caplog.at_level(logging.INFO):
            product.save()

        assert not any("product_created" in r.getMessage() for r in caplog.records)
