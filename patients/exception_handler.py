"""
统一异常处理器。

挂到 DRF 的 EXCEPTION_HANDLER setting 上。
所有响应（无论成功还是失败）前端都能用同一套逻辑判断：
  response.type 存在  → 出问题了
  没有 type 字段      → 成功

统一错误响应格式：
{
    "type":    "validation_error" | "block" | "upstream_error",
    "code":    "EMAIL_ALREADY_EXISTS",
    "message": "Email address already exists",
    "detail":  { ... }  // 可选；校验错误时按字段分组
}

状态码对照（见 exceptions.py 各类的 http_status）：
  ValidationError          400
  PatientNotFoundError     404
  EmailAlreadyExistsError  409
  ProvisioningFailedError  502
"""

from rest_framework.views import exception_handler as drf_default_handler
from rest_framework.exceptions import ValidationError as DRFValidationError
from django.http import JsonResponse

from .exceptions import BaseAppException, ValidationError


def error_body(exc):
    """BaseAppException → 统一格式的 dict。"""
    body = {
        'type': exc.type,
        'code': exc.code,
        'message': exc.message,
    }
    if exc.detail is not None:
        body['detail'] = exc.detail
    return body


def unified_exception_handler(exc, context):
    """
    DRF exception handler entry point.

    优先级：
    1. BaseAppException 及其子类 → 统一格式
    2. DRF 自带的 ValidationError（serializer.is_valid raise 的）→ 转成统一格式
    3. 其他异常 → 交给 DRF 默认处理
    """

    # --- 1. 我们自己的异常体系 ---
    if isinstance(exc, BaseAppException):
        return JsonResponse(error_body(exc), status=exc.http_status)

    # --- 2. DRF 自带的 ValidationError ---
    if isinstance(exc, DRFValidationError):
        wrapped = ValidationError(detail=exc.detail)
        return JsonResponse(error_body(wrapped), status=wrapped.http_status)

    # --- 3. 其他的交给 DRF 默认处理 ---
    return drf_default_handler(exc, context)
