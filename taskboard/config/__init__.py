from .settings import AdminSeed, Settings
from .security import SecurityConfig
