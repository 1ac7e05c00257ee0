"""Site-wide HTTP handlers: feature status and the current account."""

from django.conf import settings
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.auth import AuthContext


def _configured(block: str, key: str) -> bool:
    return bool(getattr(settings, block, {}).get(key))


class StatusView(APIView):
    """Handler for GET /api/status

    Reports which features have a backing store so the client can show a
    banner and degrade only the affected feature.
    """

    def get(self, request: Request) -> Response:
        features = {
            "signups": _configured("SIGNUPS", "STORE"),
            "shop": _configured("SHOP", "PRODUCT_STORE"),
            "clips": _configured("CLIPS", "STORE"),
        }
        return Response({"backend": "running", "features": features})


class AccountView(APIView):
    """Handler for GET /api/account"""

    def get(self, request: Request) -> Response:
        identity = AuthContext.from_request(request).identity
        if identity is None:
            return Response({"identity": None})
        return Response(
            {
                "identity": {
                    "id": identity.id,
                    "display_name": identity.display_name,
                    "email": identity.email,
                    "email_verified": identity.email_verified,
                    "photo_url": identity.photo_url,
                    "providers": list(identity.providers),
                }
            }
        )
