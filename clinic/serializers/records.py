from rest_framework import serializers


class RecordListQuerySerializer(serializers.Serializer):
    q = serializers.CharField(max_length=128, required=False, allow_blank=True)


class LabTestListQuerySerializer(serializers.Serializer):
    result = serializers.CharField(max_length=255, required=False)


class LabResultSerializer(serializers.Serializer):
    result = serializers.CharField(max_length=255)
