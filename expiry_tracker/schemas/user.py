from pydantic import BaseModel, Field

class UserCredentials(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

class UserCreate(UserCredentials):
    pass

class User(BaseModel):
    """Public view of a user; the password hash never leaves the service"""
    id: int
    email: str

    model_config = {
        "from_attributes": True
    }
