from rest_framework import serializers


class ScheduleQuerySerializer(serializers.Serializer):
    departmentId = serializers.IntegerField(min_value=1, required=False)
    start = serializers.DateField(required=False)
    end = serializers.DateField(required=False)


class WeekQuerySerializer(serializers.Serializer):
    date = serializers.DateField(required=False)
    departmentId = serializers.IntegerField(min_value=1, required=False)
