from rest_framework import serializers


class CertificateQuerySerializer(serializers.Serializer):
    # reference date for the expiry arithmetic; defaults to today
    date = serializers.DateField(required=False)


class CertificateCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, allow_blank=True)
    issued_by = serializers.CharField(max_length=255, allow_blank=True)
    issue_date = serializers.DateField()
    expiry_date = serializers.DateField()
