"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to the exception handler
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.handlers.serializers import PurchaseRequestSerializer, PurchaseSummarySerializer
from tickets.services.factory import build_purchase_service


def parse_account_id(raw: str) -> int | str:
    """Return the id as an int only when it is plain ASCII digits with no leading zero.

    Anything else (signs, underscores, padding, non-ASCII digits) is passed
    through unchanged so the service rejects it.
    """
    if raw.isascii() and raw.isdigit() and not raw.startswith("0"):
        return int(raw)
    return raw


class TicketPurchaseView(APIView):
    """Handler for POST /api/accounts/{account_id}/purchases"""

    def post(self, request: Request, account_id: str) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = build_purchase_service()
        summary = service.purchase(parse_account_id(account_id), serializer.to_domain())

        return Response(PurchaseSummarySerializer(summary).data, status=status.HTTP_201_CREATED)
