"""
HTTP 入口，只做三件事：校验请求体 → 调 PatientService → 格式化响应。

业务异常直接冒泡，由 exception_handler.unified_exception_handler 统一转换。
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import (
    PatientCreateSerializer,
    PatientRequestSerializer,
    serialize_patient,
    serialize_patient_list,
)
from .services import get_patient_service


class PatientListCreateView(APIView):
    """GET /patients - list, POST /patients - create"""

    def get(self, request):
        patients = get_patient_service().list_patients()
        return Response(serialize_patient_list(patients))

    def post(self, request):
        serializer = PatientCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        patient = get_patient_service().create_patient(serializer.validated_data)
        return Response(serialize_patient(patient), status=status.HTTP_200_OK)


class PatientDetailView(APIView):
    """PUT /patients/<id> - update, DELETE /patients/<id> - delete"""

    def put(self, request, patient_id):
        serializer = PatientRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        patient = get_patient_service().update_patient(patient_id, serializer.validated_data)
        return Response(serialize_patient(patient))

    def delete(self, request, patient_id):
        get_patient_service().delete_patient(patient_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
