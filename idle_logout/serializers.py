from rest_framework import serializers


class ActivityStatusSerializer(serializers.Serializer):
    ok = serializers.BooleanField(default=True)
    authenticated = serializers.BooleanField()
    max_idle_seconds = serializers.IntegerField()
    # None when nothing is tracked for the user (yet)
    seconds_remaining = serializers.IntegerField(allow_null=True)
