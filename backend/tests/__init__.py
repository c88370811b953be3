# Force SQLModel table registration at test discovery time
# This ensures all models are registered before any test database creation
from usermgmt.models.user import User  # noqa: F401
