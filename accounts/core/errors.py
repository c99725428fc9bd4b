"""Service 层的业务异常

Service 只抛这些异常，不关心 HTTP；路由层负责映射成状态码。
"""


class AccountError(Exception):
    """所有业务异常的基类"""


class ConflictError(AccountError):
    """name / username 已被占用"""


class NotFoundError(AccountError):
    """按 id 找不到用户"""


class ValidationError(AccountError):
    """输入格式不对，比如生日无法解析"""
