from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from infrastructure.container import container
from marketplace.ordering.api.serializers import (
    ConfirmPaymentRequestSerializer,
    ConfirmPaymentResponseSerializer,
    CreatePurchaseRequestSerializer,
    ErrorResponseSerializer,
    PurchaseResponseSerializer,
)
from marketplace.services.base import ErrorCodes, ServiceResult


def error_response(result: ServiceResult) -> Response:
    """Render a failed ServiceResult as ``{"error", "message"}`` with its HTTP status."""
    http_status = (
        status.HTTP_400_BAD_REQUEST
        if result.error in ErrorCodes.CLIENT_ERRORS
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return Response({"error": result.error, "message": result.error_detail}, status=http_status)


class PurchaseCreateView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        operation_id="purchase_create",
        summary="Create a purchase",
        description="""
        **What it receives:**
        - `purchasedItems`: list of `{productId, qty}` (at least one)
        - `senderName`, `senderContactType` (email | phone), `senderContactDetail`

        **What it returns:**
        - The purchase with snapshotted items and grand total
        - `paymentDetails`: amount owed and bank destination per seller (ascending seller ID)

        Stock is checked under row locks but only decremented on payment confirmation.
        """,
        request=CreatePurchaseRequestSerializer,
        responses={
            201: OpenApiResponse(response=PurchaseResponseSerializer, description="Purchase created"),
            400: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="validation_error, product_not_found or insufficient_stock",
            ),
            500: OpenApiResponse(response=ErrorResponseSerializer, description="database_error"),
        },
        tags=["Marketplace - Purchases"],
    )
    def post(self, request):
        result = container.purchase_service().create_purchase(request.data)

        if not result.ok:
            return error_response(result)

        return Response(PurchaseResponseSerializer(result.value).data, status=status.HTTP_201_CREATED)


class PurchaseConfirmView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        operation_id="purchase_confirm_payment",
        summary="Confirm payment of a purchase",
        description="""
        **What it receives:**
        - `purchase_id` (in URL): Purchase to confirm
        - Either `fileIds` (one proof per seller, paired with sellers in ascending ID order)
          or `payments: [{sellerId, fileId}]`

        **What it returns:**
        - Confirmation message, payment timestamp and the seller to proof pairing

        **Side effects:**
        - Stock of every purchased product is decremented
        - The purchase is marked paid; a second confirmation is rejected
        """,
        parameters=[
            OpenApiParameter(name="purchase_id", type=str, location=OpenApiParameter.PATH, description="Purchase ID"),
        ],
        request=ConfirmPaymentRequestSerializer,
        responses={
            201: OpenApiResponse(response=ConfirmPaymentResponseSerializer, description="Payment confirmed"),
            400: OpenApiResponse(
                response=ErrorResponseSerializer,
                description=(
                    "order_not_found, order_already_paid, proof_count_mismatch, proof_seller_mismatch, "
                    "invalid_proof_reference or insufficient_stock"
                ),
            ),
            500: OpenApiResponse(response=ErrorResponseSerializer, description="database_error"),
        },
        tags=["Marketplace - Purchases"],
    )
    def post(self, request, purchase_id):
        result = container.payment_confirmation_service().confirm_payment(purchase_id, request.data)

        if not result.ok:
            return error_response(result)

        return Response(ConfirmPaymentResponseSerializer(result.value).data, status=status.HTTP_201_CREATED)
