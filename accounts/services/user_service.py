# services/user_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from accounts.core.dates import parse_birth_date, today
from accounts.core.errors import ConflictError, NotFoundError, ValidationError
from accounts.core.security import hash_password, new_token, verify_password
from accounts.models.user import User, UserStatus
from accounts.repositories.user_repository import UserRepository
from accounts.schemas.user import UserCreate

logger = logging.getLogger(__name__)

USERNAME_MAX_LENGTH = User.__table__.c.username.type.length

CONFLICT_MESSAGE = "The {fields} provided {verb} not unique. Therefore, the user could not be {action}!"


def _conflict_message(username_taken: bool, name_taken: bool, action: str = "created") -> str | None:
    if username_taken and name_taken:
        return CONFLICT_MESSAGE.format(fields="username and the name", verb="are", action=action)
    if username_taken:
        return CONFLICT_MESSAGE.format(fields="username", verb="is", action=action)
    if name_taken:
        return CONFLICT_MESSAGE.format(fields="name", verb="is", action=action)
    return None


def _check_if_user_exists(repo: UserRepository, username: str, name: str) -> None:
    message = _conflict_message(
        repo.find_by_username(username) is not None,
        repo.find_by_name(name) is not None,
    )
    if message:
        logger.warning(f"Registration rejected for username={username!r}: {message}")
        raise ConflictError(message)


# ---- 列表 ----
def get_users(db: Session) -> list[User]:
    return UserRepository(db).find_all()


# ---- 注册 ----
def create_user(db: Session, req: UserCreate) -> User:
    repo = UserRepository(db)
    user = User(
        name=req.name,
        username=req.username,
        password=hash_password(req.password),
        token=new_token(),
        creation_date=today(),
        status=UserStatus.ONLINE,
    )
    # 先查一遍，给出具体是哪个字段重复
    _check_if_user_exists(repo, req.username, req.name)

    try:
        user = repo.save(user)
    except IntegrityError:
        # 并发注册：检查之后别人先提交了，由唯一约束兜底
        _check_if_user_exists(repo, req.username, req.name)
        raise ConflictError(CONFLICT_MESSAGE.format(
            fields="username or the name", verb="is", action="created"))

    logger.info(f"Created user id={user.id} username={user.username!r}")
    return user


# ---- 登录 ----
def login_user(db: Session, username: str, password: str) -> User | None:
    """
    用户名不存在和密码错误都返回 None，调用方区分不了
    成功时只在内存里换 token，持久化交给 update_status
    """
    user = UserRepository(db).find_by_username(username)
    if user is None or not verify_password(password, user.password):
        logger.warning(f"Failed login attempt for username={username!r}")
        return None

    user.token = new_token()
    logger.info(f"User id={user.id} logged in")
    return user


# ---- 查询 ----
def get_user_by_id(db: Session, user_id: int) -> User:
    user = UserRepository(db).find_by_id(user_id)
    if user is None:
        raise NotFoundError(f"User with ID {user_id} not found")
    return user


# ---- 在线状态 ----
def update_status(db: Session, user: User, status: UserStatus) -> User:
    user.status = status
    user = UserRepository(db).save(user)
    logger.info(f"User id={user.id} is now {status.value}")
    return user


# ---- 修改资料 ----
def update_user(db: Session, user: User, username: str | None, birth_date: str | None) -> User:
    """
    空字符串 / None 表示不修改
    生日先解析，格式不对直接抛 ValidationError，什么都不写
    """
    if username and len(username) > USERNAME_MAX_LENGTH:
        raise ValidationError(f"Username must be at most {USERNAME_MAX_LENGTH} characters long")
    formatted_birth_date = parse_birth_date(birth_date) if birth_date else None

    if username:
        user.username = username
    if formatted_birth_date:
        user.birth_date = formatted_birth_date

    try:
        user = UserRepository(db).save(user)
    except IntegrityError:
        raise ConflictError(_conflict_message(True, False, action="updated"))

    logger.info(f"Updated user id={user.id}")
    return user
