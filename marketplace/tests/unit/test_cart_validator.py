import pytest

from marketplace.ordering.domain.services.cart_validator import CartLine, CartValidator
from marketplace.ordering.domain.validation import MAX_IDENTITY, is_valid_email, is_valid_phone, parse_identity
from marketplace.services.base import ErrorCodes


def valid_payload(**overrides):
    payload = {
        "purchasedItems": [{"productId": "7", "qty": 2}, {"productId": 9, "qty": 1}],
        "senderName": "Budi Santoso",
        "senderContactType": "email",
        "senderContactDetail": "budi@example.com",
    }
    payload.update(overrides)
    return payload


@pytest.mark.unit
class TestCartValidator:
    def setup_method(self):
        self.validator = CartValidator()

    def test_valid_cart_keeps_submission_order(self):
        result = self.validator.validate(valid_payload())

        assert result.ok
        assert result.value.lines == (CartLine(7, 2), CartLine(9, 1))
        assert result.value.product_ids == [7, 9]
        assert result.value.sender_contact_type == "email"

    @pytest.mark.parametrize("items", [None, [], "7", {"productId": "7", "qty": 1}])
    def test_rejects_missing_or_empty_items(self, items):
        result = self.validator.validate(valid_payload(purchasedItems=items))

        assert not result.ok
        assert result.error == ErrorCodes.VALIDATION_ERROR
        assert "purchasedItems" in result.error_detail

    @pytest.mark.parametrize("qty", [0, -1, "two", 1.5, True, None])
    def test_rejects_non_positive_or_non_integer_qty(self, qty):
        items = [{"productId": "7", "qty": 1}, {"productId": "8", "qty": qty}]
        result = self.validator.validate(valid_payload(purchasedItems=items))

        assert not result.ok
        assert result.error_detail == "purchasedItems[1].qty: Must be a positive integer."

    def test_numeric_strings_are_coerced(self):
        result = self.validator.validate(valid_payload(purchasedItems=[{"productId": 7, "qty": "2"}]))

        assert result.ok
        assert result.value.lines == (CartLine(7, 2),)

    @pytest.mark.parametrize("product_id", ["abc", "", "0", "-3", None, 2.5, "\u00b2", "1\u00b2", str(MAX_IDENTITY + 1)])
    def test_rejects_unparsable_product_id(self, product_id):
        result = self.validator.validate(valid_payload(purchasedItems=[{"productId": product_id, "qty": 1}]))

        assert not result.ok
        assert result.error_detail == "purchasedItems[0].productId: Not a valid product ID."

    @pytest.mark.parametrize("name", ["Bob", "x" * 56, None, ["Budi"]])
    def test_rejects_sender_name_out_of_bounds(self, name):
        result = self.validator.validate(valid_payload(senderName=name))

        assert not result.ok
        assert "senderName" in result.error_detail

    @pytest.mark.parametrize("name", ["Budi", "x" * 55])
    def test_accepts_sender_name_at_bounds(self, name):
        assert self.validator.validate(valid_payload(senderName=name)).ok

    def test_rejects_unknown_contact_type(self):
        result = self.validator.validate(valid_payload(senderContactType="fax"))

        assert not result.ok
        assert result.error_detail == "senderContactType: Must be one of: email, phone."

    def test_rejects_bad_email(self):
        result = self.validator.validate(valid_payload(senderContactDetail="budi.example.com"))

        assert not result.ok
        assert result.error_detail == "senderContactDetail: Invalid email format"

    def test_phone_contact(self):
        ok = self.validator.validate(valid_payload(senderContactType="phone", senderContactDetail="+628123456789"))
        bad = self.validator.validate(valid_payload(senderContactType="phone", senderContactDetail="08123456789"))

        assert ok.ok
        assert not bad.ok
        assert bad.error_detail == "senderContactDetail: Invalid phone number format"

    def test_rejects_non_object_body(self):
        result = self.validator.validate(["not", "a", "dict"])

        assert not result.ok
        assert result.error == ErrorCodes.VALIDATION_ERROR


@pytest.mark.unit
class TestIdentityAndContactFormats:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("7", 7),
            (" 12 ", 12),
            (3, 3),
            (str(MAX_IDENTITY), MAX_IDENTITY),
            ("0", None),
            (0, None),
            (True, None),
            ("\u00b2", None),
            ("\u0663", None),
            (str(MAX_IDENTITY + 1), None),
            (MAX_IDENTITY + 1, None),
            (7.0, None),
        ],
    )
    def test_parse_identity(self, value, expected):
        assert parse_identity(value) == expected

    @pytest.mark.parametrize("value", ["a@b.co", "first.last@shop.example.id"])
    def test_valid_emails(self, value):
        assert is_valid_email(value)

    @pytest.mark.parametrize("value", ["a@b", "@b.co", "a b@c.co", "a@b."])
    def test_invalid_emails(self, value):
        assert not is_valid_email(value)

    @pytest.mark.parametrize("value", ["+0812345", "+1234567890123456", "62812345", "+62-812"])
    def test_invalid_phones(self, value):
        assert not is_valid_phone(value)
