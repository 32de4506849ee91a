from pydantic import BaseModel, ConfigDict

class UserIdentity(BaseModel):
    """Display fields joined into posts and comments at read time"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
