from __future__ import annotations

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import permissions, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from .feature_flag import provider_enabled, stamps_enabled
from .registry import get_registry
from .serializers import StampVerifyRequestSerializer, StampVerifyResponseSerializer

logger = logging.getLogger(__name__)


class StampVerifyView(APIView):
    permission_classes = [permissions.IsAuthenticated]
    throttle_scope = "stamps"

    @extend_schema(request=StampVerifyRequestSerializer, responses=StampVerifyResponseSerializer)
    def post(self, request: Request) -> Response:
        if not stamps_enabled():
            return Response({"detail": "Stamps disabled"}, status=status.HTTP_403_FORBIDDEN)

        serializer = StampVerifyRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payload = serializer.to_payload()

        registry = get_registry()
        if payload.type not in registry:
            return Response({"detail": "Unknown stamp type."}, status=status.HTTP_404_NOT_FOUND)
        if not provider_enabled(payload.type):
            return Response({"detail": f"{payload.type} disabled"}, status=status.HTTP_403_FORBIDDEN)

        outcome = registry.get(payload.type).verify(payload)
        logger.info(
            "stamps.verify.completed",
            extra={"stamp_type": payload.type, "valid": outcome.valid, "user_id": request.user.pk},
        )
        return Response({"type": payload.type, **outcome.to_dict()}, status=status.HTTP_200_OK)


class StampProviderListView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request: Request) -> Response:
        types = [provider_type for provider_type in get_registry().types() if provider_enabled(provider_type)]
        return Response({"providers": types})
