import uuid

import bcrypt

from accounts.core.config import settings
from accounts.core.errors import ValidationError

# bcrypt 只处理前 72 个字节，新版本超出直接报错
MAX_PASSWORD_BYTES = 72


# -------- 密码 --------
def validate_password(password: str) -> None:
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")


def hash_password(password: str) -> str:
    validate_password(password)
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """哈希格式不对或密码超长都只返回 False，不往外抛"""
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


# -------- 会话 token --------
def new_token() -> str:
    return str(uuid.uuid4())
