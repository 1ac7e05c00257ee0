"""HTTP handlers (views) for the game-day board.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler
- Never contain business logic
"""

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.auth import AuthContext
from common.storage import SessionStorage
from signups.handlers.serializers import (
    CheckInOutcomeSerializer,
    CheckInRequestSerializer,
    GameDaySerializer,
    GuestSignupRequestSerializer,
    SignupSerializer,
)
from signups.services.checkin_engine import CheckInEngine
from signups.stores import get_signup_store
from signups.stores.guest_markers import GuestMarkerStore
from signups.stores.inflight import InFlightGuard


def engine_for(request: Request) -> CheckInEngine:
    config = settings.SIGNUPS
    return CheckInEngine(
        store=get_signup_store(),
        markers=GuestMarkerStore(SessionStorage(request.session)),
        guard=InFlightGuard(timeout=config["WRITE_TIMEOUT"]),
        sign_in_url=config["SIGN_IN_URL"],
    )


class ScheduleView(APIView):
    """Handler for GET /api/schedule"""

    def get(self, request: Request) -> Response:
        auth = AuthContext.from_request(request)
        board = engine_for(request).week_board(auth)
        return Response(GameDaySerializer(board, many=True).data)


class SignupCountsView(APIView):
    """Handler for GET /api/signups/counts?dates=YYYY-MM-DD,..."""

    def get(self, request: Request) -> Response:
        raw = request.query_params.get("dates", "")
        dates = [value.strip() for value in raw.split(",") if value.strip()]
        counts = engine_for(request).counts(dates)
        return Response({"dates": dates, "counts": counts})


class CheckInView(APIView):
    """Handler for POST /api/signups/check-in"""

    def post(self, request: Request) -> Response:
        payload = CheckInRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        auth = AuthContext.from_request(request)
        outcome = engine_for(request).request_check_in(auth, payload.validated_data["date"])
        return Response(CheckInOutcomeSerializer(outcome).data)


class GuestSignupView(APIView):
    """Handler for POST /api/signups/guests"""

    def post(self, request: Request) -> Response:
        payload = GuestSignupRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        auth = AuthContext.from_request(request, create_session=True)
        signup = engine_for(request).submit_guest(
            auth, payload.validated_data["date"], payload.validated_data["name"]
        )
        return Response(SignupSerializer(signup).data, status=status.HTTP_201_CREATED)


class PlayerListView(APIView):
    """Handler for GET /api/players"""

    def get(self, request: Request) -> Response:
        players = engine_for(request).players()
        return Response(SignupSerializer(players, many=True).data)
