"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from django.http import HttpResponse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from theater.domain import DomainError
from theater.handlers.serializers import StatementRequestSerializer
from theater.services import StatementService
from theater.stores import InMemoryPlayStore

logger = logging.getLogger(__name__)


class StatementView(APIView):
    """Handler for POST /api/statements"""

    def post(self, request: Request) -> HttpResponse:
        serializer = StatementRequestSerializer(data=request.data)
        if not serializer.is_valid():
            logger.info("Rejected statement request: invalid payload")
            return Response({"errors": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        try:
            invoice, plays = serializer.to_domain()
            service = StatementService(
                InMemoryPlayStore(plays),
                line_separator=settings.THEATER_STATEMENT_LINE_SEPARATOR,
            )
            text = service.statement(invoice)
        except DomainError as exc:
            logger.info("Rejected statement request: %s", exc.code.value)
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )

        return HttpResponse(text, content_type="text/plain; charset=utf-8")
