from usermgmt.models.user import User, UserDTO, UserPrivateDTO

__all__ = [
    "User",
    "UserDTO",
    "UserPrivateDTO",
]
