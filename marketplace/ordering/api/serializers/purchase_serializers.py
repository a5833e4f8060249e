"""
Purchase API serializers.

Request serializers validate the request bodies. CartValidator and
PaymentConfirmationService run them and turn the first error into a
``validation_error`` message prefixed with the field path, e.g.
``purchasedItems[1].qty: Must be a positive integer.`` Response serializers
render the service result dataclasses with camelCase keys.
"""

from rest_framework import serializers
from rest_framework.settings import api_settings

from marketplace.ordering.domain.models import Purchase
from marketplace.ordering.domain.validation import (
    SENDER_NAME_MAX_LENGTH,
    SENDER_NAME_MIN_LENGTH,
    is_valid_email,
    is_valid_phone,
    parse_identity,
)


def first_error_message(errors, path=""):
    """
    Flatten DRF ``serializer.errors`` to the first message, prefixed with its
    field path (``purchasedItems[0].productId``). Non-field errors carry the
    path of the object they belong to.
    """
    if isinstance(errors, dict):
        for key, value in errors.items():
            if key == api_settings.NON_FIELD_ERRORS_KEY:
                child_path = path
            elif isinstance(key, int):
                # ListField child errors are keyed by index
                child_path = f"{path}[{key}]"
            else:
                child_path = f"{path}.{key}" if path else str(key)
            message = first_error_message(value, child_path)
            if message:
                return message
        return None

    if isinstance(errors, list):
        for index, value in enumerate(errors):
            if isinstance(value, (dict, list)):
                message = first_error_message(value, f"{path}[{index}]")
                if message:
                    return message
            elif value:
                return f"{path}: {value}" if path else str(value)
        return None

    return f"{path}: {errors}" if path else str(errors)


# ===== Common =====


class ErrorResponseSerializer(serializers.Serializer):
    """Standard error response"""

    error = serializers.CharField(help_text="Error code identifier, e.g. insufficient_stock")
    message = serializers.CharField(help_text="Human-readable error message")


# ===== Create purchase =====

INVALID_PRODUCT_ID = "Not a valid product ID."
INVALID_QUANTITY = "Must be a positive integer."


class PurchasedItemRequestSerializer(serializers.Serializer):
    productId = serializers.CharField(
        help_text="Product ID",
        error_messages={"invalid": INVALID_PRODUCT_ID, "null": INVALID_PRODUCT_ID, "blank": INVALID_PRODUCT_ID},
    )
    qty = serializers.IntegerField(
        min_value=1,
        help_text="Quantity to buy",
        error_messages={
            "invalid": INVALID_QUANTITY,
            "null": INVALID_QUANTITY,
            "min_value": INVALID_QUANTITY,
            "max_string_length": INVALID_QUANTITY,
        },
    )

    def validate_productId(self, value):
        product_id = parse_identity(value)
        if product_id is None:
            raise serializers.ValidationError(INVALID_PRODUCT_ID)
        return product_id


class CreatePurchaseRequestSerializer(serializers.Serializer):
    """Request body for creating a purchase"""

    purchasedItems = PurchasedItemRequestSerializer(many=True, allow_empty=False, help_text="Cart lines, at least one")
    senderName = serializers.CharField(
        min_length=SENDER_NAME_MIN_LENGTH, max_length=SENDER_NAME_MAX_LENGTH, help_text="Buyer name"
    )
    senderContactType = serializers.ChoiceField(
        choices=Purchase.CONTACT_TYPE_CHOICES,
        error_messages={"invalid_choice": "Must be one of: email, phone."},
    )
    senderContactDetail = serializers.CharField(help_text="Email address or E.164 phone number (+628123456789)")

    def validate(self, attrs):
        contact_type = attrs["senderContactType"]
        contact_detail = attrs["senderContactDetail"]
        if contact_type == "email" and not is_valid_email(contact_detail):
            raise serializers.ValidationError({"senderContactDetail": "Invalid email format"})
        if contact_type == "phone" and not is_valid_phone(contact_detail):
            raise serializers.ValidationError({"senderContactDetail": "Invalid phone number format"})
        return attrs


class PurchasedItemResponseSerializer(serializers.Serializer):
    productId = serializers.CharField(source="product_id")
    name = serializers.CharField()
    category = serializers.CharField(help_text="Category name, empty when uncategorised")
    qty = serializers.IntegerField()
    price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text="Unit price at purchase time, as a decimal string with two places (\"15000.00\")",
    )
    sku = serializers.CharField()
    fileId = serializers.CharField(source="file_id")
    fileUri = serializers.CharField(source="file_uri")
    fileThumbnailUri = serializers.CharField(source="file_thumbnail_uri")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class PaymentDetailResponseSerializer(serializers.Serializer):
    sellerId = serializers.CharField(source="seller_id")
    bankAccountName = serializers.CharField(source="bank_account_name")
    bankAccountHolder = serializers.CharField(source="bank_account_holder")
    bankAccountNumber = serializers.CharField(source="bank_account_number")
    totalPrice = serializers.IntegerField(source="total_price", help_text="Amount owed to this seller")


class PurchaseResponseSerializer(serializers.Serializer):
    purchaseId = serializers.CharField(source="purchase_id")
    purchasedItems = PurchasedItemResponseSerializer(source="purchased_items", many=True)
    totalPrice = serializers.IntegerField(source="total_price")
    paymentDetails = PaymentDetailResponseSerializer(
        source="payment_details", many=True, help_text="One entry per seller, ascending seller ID"
    )


# ===== Confirm payment =====

INVALID_SELLER_ID = "Not a valid seller ID."


class ProofPairSerializer(serializers.Serializer):
    sellerId = serializers.CharField(
        error_messages={"invalid": INVALID_SELLER_ID, "null": INVALID_SELLER_ID, "blank": INVALID_SELLER_ID}
    )
    # Resolved against stored files inside the confirmation transaction
    fileId = serializers.CharField()

    def validate_sellerId(self, value):
        seller_id = parse_identity(value)
        if seller_id is None:
            raise serializers.ValidationError(INVALID_SELLER_ID)
        return seller_id


class ConfirmPaymentRequestSerializer(serializers.Serializer):
    """Request body for confirming a purchase's payment. Send exactly one of the two fields."""

    fileIds = serializers.ListField(
        child=serializers.CharField(),
        required=False,
        allow_empty=False,
        help_text="One proof per seller, in the order of paymentDetails from the create response",
    )
    payments = ProofPairSerializer(
        many=True, required=False, allow_empty=False, help_text="Explicit seller to proof pairing"
    )

    def validate(self, attrs):
        if ("fileIds" in attrs) == ("payments" in attrs):
            raise serializers.ValidationError("Provide exactly one of fileIds or payments")
        return attrs


class ProofAssignmentResponseSerializer(serializers.Serializer):
    sellerId = serializers.CharField(source="seller_id")
    fileId = serializers.CharField(source="file_id")


class ConfirmPaymentResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    purchaseId = serializers.CharField(source="purchase_id")
    paidAt = serializers.DateTimeField(source="paid_at")
    paymentDetails = ProofAssignmentResponseSerializer(source="payment_details", many=True)
