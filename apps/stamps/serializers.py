from __future__ import annotations

from rest_framework import serializers

from .types import RequestPayload


class SignerChallengeSerializer(serializers.Serializer):
    challenge = serializers.CharField()
    signature = serializers.CharField()


class StampVerifyRequestSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=64)
    address = serializers.CharField(max_length=64, required=False, allow_blank=True, default="")
    version = serializers.CharField(max_length=16, required=False, default="0.0.0")
    proofs = serializers.DictField(child=serializers.CharField(allow_blank=True), required=False, default=dict)
    signer = SignerChallengeSerializer(required=False, allow_null=True, default=None)

    def validate(self, attrs: dict) -> dict:
        if not attrs.get("address") and not attrs.get("signer"):
            raise serializers.ValidationError("address or signer is required.")
        return attrs

    def to_payload(self) -> RequestPayload:
        return RequestPayload.from_dict(self.validated_data)


class StampVerifyResponseSerializer(serializers.Serializer):
    type = serializers.CharField()
    valid = serializers.BooleanField()
    record = serializers.DictField(child=serializers.CharField(), required=False)
    error = serializers.ListField(child=serializers.CharField(), required=False)
