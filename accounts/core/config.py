from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # ---------- 数据库 ----------
    # 直接给完整 URL 时优先使用
    DATABASE_URL: Optional[str] = None

    # MySQL，配置了 DB_HOST 才启用
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_DATABASE: str = "accounts"

    # 本地开发默认走 sqlite 文件
    SQLITE_PATH: str = "accounts.db"

    #跨域
    CORS_ORIGINS: str = "http://localhost:3000"

    # ---------- 密码 ----------
    BCRYPT_ROUNDS: int = 12

    # ---------- 日志 ----------
    LOG_LEVEL: str = "INFO"

    # ---------- 服务 ----------
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000

    @property
    def DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST:
            return (
                f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_DATABASE}?charset=utf8mb4"
            )
        return f"sqlite:///{self.SQLITE_PATH}"

    @property
    def CORS_ORIGINS_LIST(self) -> List[str]:
        return [orig.strip() for orig in self.CORS_ORIGINS.split(",") if orig.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
