# 用户注册、登录、登出、资料
import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from accounts.core.errors import ConflictError, NotFoundError, ValidationError
from accounts.db.database import get_db
from accounts.models.user import UserStatus
from accounts.schemas.user import UserAuthResponse, UserCreate, UserLogin, UserResponse, UserUpdate
from accounts.services import user_service

logger = logging.getLogger(__name__)

router = APIRouter()

USER_NOT_FOUND = "User not found."

# 1. 用户列表
@router.get("/users", response_model=list[UserResponse])
def get_all_users(db: Session = Depends(get_db)):
    return user_service.get_users(db)

# 2. 注册
@router.post("/users", response_model=UserAuthResponse, status_code=201)
def create_user(req: UserCreate, db: Session = Depends(get_db)):
    try:
        return user_service.create_user(db, req)
    except (ConflictError, ValidationError) as e:
        raise HTTPException(400, detail=str(e))

# 3. 登录
@router.post("/login", response_model=UserAuthResponse)
def login(req: UserLogin, db: Session = Depends(get_db)):
    user = user_service.login_user(db, req.username, req.password)
    if not user:
        return Response(status_code=401)
    # 新 token 和在线状态一起落库
    return user_service.update_status(db, user, UserStatus.ONLINE)

# 4. 登出
@router.post("/users/{user_id}/logout", response_class=PlainTextResponse)
def logout(user_id: int, db: Session = Depends(get_db)):
    try:
        user = user_service.get_user_by_id(db, user_id)
        user_service.update_status(db, user, UserStatus.OFFLINE)
    except NotFoundError:
        raise HTTPException(404, detail=USER_NOT_FOUND)
    except Exception:
        logger.exception(f"Logout failed for user id={user_id}")
        raise HTTPException(500, detail="Error during logout.")
    return "User logged out successfully."

# 5. 单个用户
@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    try:
        return user_service.get_user_by_id(db, user_id)
    except NotFoundError as e:
        raise HTTPException(404, detail=str(e))

# 6. 修改资料
@router.put("/users/{user_id}", response_class=PlainTextResponse, status_code=202)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    try:
        user = user_service.get_user_by_id(db, user_id)
        user_service.update_user(db, user, payload.username, payload.birth_date)
    except NotFoundError:
        raise HTTPException(404, detail=USER_NOT_FOUND)
    except (ValidationError, ConflictError) as e:
        raise HTTPException(400, detail=str(e))
    return "Changes saved successfully."
