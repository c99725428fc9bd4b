import os

# 必须在导入 accounts 之前设置，Settings 在导入时读取环境变量
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SKIP_DB_INIT", "1")
os.environ.setdefault("DATABASE_URL", "sqlite://")
