import enum

from sqlalchemy import Column, Integer, String, Enum
from accounts.db.database import Base


class UserStatus(str, enum.Enum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"


class User(Base):
    __tablename__ = "users"

    id            = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name          = Column(String(64), unique=True, nullable=False)     # 显示名，全局唯一
    username      = Column(String(32), unique=True, nullable=False)     # 登录名，全局唯一
    password      = Column(String(128), nullable=False)                 # bcrypt 哈希
    token         = Column(String(36), nullable=False)                  # 每次登录重新生成
    status        = Column(Enum(UserStatus, name="user_status"), nullable=False, default=UserStatus.OFFLINE)
    creation_date = Column(String(10), nullable=False)                  # dd.MM.yyyy
    birth_date    = Column(String(10), nullable=True)                   # dd.MM.yyyy

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} status={self.status}>"
