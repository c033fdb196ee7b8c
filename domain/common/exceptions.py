"""领域层业务异常定义，供领域与基础设施使用。

校验类异常在发起任何网络请求之前抛出；远端错误定义在
infrastructure.external.api_clients.exceptions 中。
"""
from __future__ import annotations

from typing import Optional
from shared.codes import BusinessCode


class BusinessException(Exception):
    """业务异常基类"""

    def __init__(
        self,
        code: int,
        message: str,
        error_type: str = "BusinessError",
        details: Optional[dict] = None,
        field: Optional[str] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details
        self.field = field
        super().__init__(self.message)


class DomainValidationException(BusinessException):
    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        details: dict | None = None,
        code: int = BusinessCode.PARAM_VALIDATION_ERROR,
        error_type: str = "DomainValidationError",
    ):
        super().__init__(
            code=code,
            message=message,
            error_type=error_type,
            details=details,
            field=field,
        )


class ParamOutOfRangeException(DomainValidationException):
    """数值参数超出允许范围"""

    def __init__(self, field: str, value: int, minimum: int, maximum: int):
        super().__init__(
            f"{field} value ({value}) outside of acceptable range ({minimum} - {maximum})",
            field=field,
            details={"value": value, "min": minimum, "max": maximum},
            code=BusinessCode.PARAM_OUT_OF_RANGE,
            error_type="ParamOutOfRange",
        )


class ParamMissingException(DomainValidationException):
    def __init__(self, fields: tuple[str, ...]):
        super().__init__(
            f"Not all required values ({' & '.join(fields)}) were set",
            field=fields[0] if len(fields) == 1 else None,
            details={"fields": list(fields)},
            code=BusinessCode.PARAM_MISSING,
            error_type="ParamMissing",
        )


class ApiKeyRequiredException(BusinessException):
    """操作需要 API key 但客户端未配置"""

    def __init__(self, operation: str):
        super().__init__(
            code=BusinessCode.UNAUTHORIZED,
            message=f"Can't use {operation} when no API key is provided",
            error_type="ApiKeyRequired",
            details={"operation": operation},
            field="api_key",
        )
