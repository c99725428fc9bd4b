from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from accounts.api import user
from accounts.core.config import settings
from accounts.core.logging import configure_logging
from accounts.db.database import engine
from accounts.db.init_db import init
import os
import logging

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # ===== 启动阶段 =====
    configure_logging(settings.LOG_LEVEL)

    # 多 worker 部署时只让一个进程建表
    if os.environ.get("SKIP_DB_INIT") != "1":
        try:
            init()
        except Exception as e:
            logger.error(f"Database initialisation failed: {e}")
            # 不阻止应用启动，因为表可能已经被其他worker创建

    yield
    # ===== 关闭阶段 =====
    engine.dispose()

app = FastAPI(
    title="User Accounts",
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS_LIST,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(user.router, tags=["Users"])

# 根路由
@app.get("/")
def root():
    return {"msg": "User account service is running"}


@app.get("/health")
def health_check():
    """健康检查端点，用于监控服务状态"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        return {"status": "unhealthy", "database": "disconnected", "error": str(e)}
