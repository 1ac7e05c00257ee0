"""Serializers for transforming signup domain models to API responses."""

from django.conf import settings
from rest_framework import serializers

from signups.domain import ConfirmPrompt, PromptAction


def action_data(action: PromptAction, day) -> dict:
    return {
        "action": action.value,
        "redirect": action.target(day, settings.SIGNUPS["SIGN_IN_URL"]),
    }


class SignupSerializer(serializers.Serializer):
    """Serializer for Signup domain model (public fields only)."""

    id = serializers.CharField()
    display_name = serializers.CharField()
    date = serializers.DateField()
    is_guest = serializers.BooleanField()
    sponsor_name = serializers.CharField(allow_null=True)
    created_at = serializers.DateTimeField()


class CheckInOutcomeSerializer(serializers.Serializer):
    """Serializer for CheckInOutcome; the prompt is a tagged object."""

    status = serializers.CharField(source="status.value")
    date = serializers.DateField()
    message = serializers.CharField()
    count = serializers.IntegerField(allow_null=True)
    link = serializers.CharField(allow_null=True)
    prompt = serializers.SerializerMethodField()

    def get_prompt(self, outcome) -> dict:
        prompt = outcome.prompt
        if not isinstance(prompt, ConfirmPrompt):
            return {"kind": "idle"}
        return {
            "kind": "confirm",
            "message": prompt.message,
            "confirm": action_data(prompt.on_confirm, outcome.date),
            "cancel": action_data(prompt.on_cancel, outcome.date),
        }


class GameDaySerializer(serializers.Serializer):
    """Serializer for one GameDay on the weekly board."""

    date = serializers.DateField()
    weekday = serializers.CharField()
    hours = serializers.CharField()
    special = serializers.CharField()
    price = serializers.CharField()
    discount_price = serializers.CharField(allow_null=True)
    late_pricing = serializers.CharField(allow_null=True)
    count = serializers.IntegerField()
    state = serializers.CharField(source="state.value")


# Input


class CheckInRequestSerializer(serializers.Serializer):
    date = serializers.CharField(required=False, allow_blank=True, default="")


class GuestSignupRequestSerializer(serializers.Serializer):
    date = serializers.CharField(required=False, allow_blank=True, default="")
    name = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=True)
