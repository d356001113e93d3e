from rest_framework import serializers

from clinic.models import LeaveRequest


class LeaveListQuerySerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=['all'] + [v for v, _ in LeaveRequest.STATUS_CHOICES], required=False)
    start = serializers.DateField(required=False)
    end = serializers.DateField(required=False)

    def validate(self, attrs):
        start, end = attrs.get('start'), attrs.get('end')
        if start and end and start > end:
            raise serializers.ValidationError('start must not be after end')
        return attrs


class LeaveCreateSerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    reason = serializers.CharField(max_length=2000, allow_blank=True)


class LeaveReviewSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[LeaveRequest.STATUS_APPROVED, LeaveRequest.STATUS_REJECTED])
