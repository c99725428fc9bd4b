from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from accounts.models.user import UserStatus


#注册
class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=64)
    username: str = Field(min_length=1, max_length=32)
    password: str = Field(min_length=1)  # bcrypt 字节上限在 service 里校验

#登录
class UserLogin(BaseModel):
    username: str
    password: str

#修改资料，不传或传空字符串表示不改
class UserUpdate(BaseModel):
    username: str | None = None
    birth_date: str | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

#返回给前端展示用，不带密码
class UserResponse(BaseModel):
    id: int
    name: str
    username: str
    status: UserStatus
    creation_date: str | None = None
    birth_date: str | None = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

#注册 / 登录成功时返回自己的 token
class UserAuthResponse(UserResponse):
    token: str
