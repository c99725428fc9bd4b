# 把模型先引进来，Base 才知道要建哪些表
from accounts.db.database import Base, engine
from accounts.models import user
import logging

logger = logging.getLogger(__name__)

def init(bind=engine):
    """初始化数据库表，已存在的表直接跳过"""
    Base.metadata.create_all(bind=bind, checkfirst=True)
    logger.info("Database tables created/verified")

if __name__ == "__main__":
    init()
