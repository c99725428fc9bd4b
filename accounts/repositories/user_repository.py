# repositories/user_repository.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from accounts.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """users 表的薄封装，业务规则都放在 service 里"""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def find_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def find_by_name(self, name: str) -> User | None:
        return self.db.query(User).filter(User.name == name).first()

    def save(self, user: User) -> User:
        """
        新增或更新，提交后刷新（拿到自增 id）
        唯一约束冲突时回滚并原样抛出 IntegrityError，由 service 翻译
        """
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Integrity violation while saving user {user.username!r}")
            raise
        self.db.refresh(user)
        return user
