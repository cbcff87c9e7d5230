"""
请求校验 + 响应格式化。

- PatientRequestSerializer / PatientCreateSerializer：JSON → validated_data，
  失败时 raise DRF ValidationError，由 exception_handler 转成统一格式（按字段分组）。
- serialize_patient：ORM 对象 → JSON-able dict，只负责输出。

对外字段用 camelCase（dateOfBirth / registeredDate），内部统一 snake_case。
"""

from rest_framework import serializers


class PatientRequestSerializer(serializers.Serializer):
    """PUT /patients/<id> 的请求体。registeredDate 不允许通过更新修改。"""

    name = serializers.CharField(max_length=100)
    email = serializers.EmailField(max_length=254)
    address = serializers.CharField(max_length=255)
    dateOfBirth = serializers.DateField(source='date_of_birth')


class PatientCreateSerializer(PatientRequestSerializer):
    """POST /patients 的请求体，比更新多一个必填的 registeredDate。"""

    registeredDate = serializers.DateField(source='registered_date')


def serialize_patient(patient):
    """Serialize a patient for create / update / list responses."""
    return {
        'id': str(patient.id),
        'name': patient.name,
        'email': patient.email,
        'address': patient.address,
        'dateOfBirth': patient.date_of_birth.isoformat(),
    }


def serialize_patient_list(patients):
    return [serialize_patient(patient) for patient in patients]
