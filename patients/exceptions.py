"""
统一异常体系。

所有业务异常继承 BaseAppException，包含：
- type:        错误类型标识（validation_error / block / upstream_error）
- code:        业务错误码（EMAIL_ALREADY_EXISTS / PATIENT_NOT_FOUND / ...）
- message:     人类可读的描述
- detail:      可选的附加信息（dict / list / None）
- http_status: HTTP 状态码

Service / repository 只需 raise，exception_handler 统一捕获并格式化响应。
"""


class BaseAppException(Exception):
    """所有业务异常的基类。"""

    type = 'error'
    code = 'UNKNOWN_ERROR'
    http_status = 500
    default_message = 'Unexpected error'

    def __init__(self, message=None, code=None, detail=None, http_status=None):
        self.message = message if message is not None else self.default_message
        if code is not None:
            self.code = code
        if http_status is not None:
            self.http_status = http_status
        self.detail = detail
        super().__init__(self.message)


class ValidationError(BaseAppException):
    """输入验证失败，detail 为按字段分组的错误。400。"""

    type = 'validation_error'
    code = 'VALIDATION_ERROR'
    http_status = 400
    default_message = 'Request validation failed'


class BlockError(BaseAppException):
    """业务规则阻止操作。service 层抛出，409。"""

    type = 'block'
    code = 'BUSINESS_BLOCK'
    http_status = 409
    default_message = 'Operation blocked'


class EmailAlreadyExistsError(BlockError):
    """邮箱已被其他患者占用。预检查和数据库唯一索引都会抛这个。"""

    code = 'EMAIL_ALREADY_EXISTS'
    default_message = 'Email address already exists'


class PatientNotFoundError(BlockError):
    code = 'PATIENT_NOT_FOUND'
    http_status = 404
    default_message = 'Patient not found'


class ProvisioningFailedError(BaseAppException):
    """
    Billing 账户开通失败（网络错误 / 远端拒绝 / 超时统一归到这里）。

    注意：抛出时患者记录已经提交，不会回滚。
    """

    type = 'upstream_error'
    code = 'PROVISIONING_FAILED'
    http_status = 502
    default_message = 'Billing account provisioning failed'
