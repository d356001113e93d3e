from rest_framework import serializers


class PrescriptionListQuerySerializer(serializers.Serializer):
    q = serializers.CharField(max_length=128, required=False, allow_blank=True)
    # unknown values are accepted and yield an empty list
    status = serializers.CharField(max_length=32, required=False)


class PrescriptionCreateSerializer(serializers.Serializer):
    medical_record_id = serializers.IntegerField(min_value=1, required=False)
    patient_id = serializers.IntegerField(min_value=1, required=False)
    medicine_id = serializers.IntegerField(min_value=1)
    dosage = serializers.CharField(max_length=64, allow_blank=True)
    frequency = serializers.CharField(max_length=64, required=False, allow_blank=True)
    duration = serializers.CharField(max_length=64, required=False, allow_blank=True)

    def validate(self, attrs):
        if not attrs.get('medical_record_id') and not attrs.get('patient_id'):
            raise serializers.ValidationError('medical_record_id or patient_id is required')
        return attrs


class PrescriptionUpdateSerializer(serializers.Serializer):
    medicine_id = serializers.IntegerField(min_value=1, required=False)
    dosage = serializers.CharField(max_length=64, required=False)
    frequency = serializers.CharField(max_length=64, required=False, allow_blank=True)
    duration = serializers.CharField(max_length=64, required=False, allow_blank=True)
