"""Serializers for turning statement requests into domain models.

Only the input shape is checked here. Genre and catalog resolution are
domain rules enforced by the statement service. Text is passed through
untrimmed so ids match catalog keys and names print verbatim.
"""

from rest_framework import serializers

from theater.domain import Invoice, Performance, Play


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that only accepts JSON integers, never strings or floats."""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, int):
            self.fail("invalid")
        return super().to_internal_value(data)


class PlaySerializer(serializers.Serializer):
    """Catalog entry: ``{"name": ..., "genre": ...}``."""

    name = serializers.CharField(trim_whitespace=False)
    genre = serializers.CharField(trim_whitespace=False)


class PerformanceSerializer(serializers.Serializer):
    """Invoice line: ``{"playId": ..., "audience": ...}``."""

    playId = serializers.CharField(source="play_id", trim_whitespace=False)
    audience = StrictIntegerField(min_value=0)


class InvoiceSerializer(serializers.Serializer):
    customer = serializers.CharField(trim_whitespace=False, allow_blank=True)
    performances = PerformanceSerializer(many=True, allow_empty=True)


class StatementRequestSerializer(serializers.Serializer):
    """Request body for POST /api/statements."""

    invoice = InvoiceSerializer()
    plays = serializers.DictField(child=PlaySerializer())

    def to_domain(self) -> tuple[Invoice, dict[str, Play]]:
        """Build domain models from validated data."""
        data = self.validated_data
        invoice = Invoice(
            customer=data["invoice"]["customer"],
            performances=tuple(
                Performance(play_id=item["play_id"], audience=item["audience"])
                for item in data["invoice"]["performances"]
            ),
        )
        plays = {
            play_id: Play(name=item["name"], genre=item["genre"])
            for play_id, item in data["plays"].items()
        }
        return invoice, plays
