"""
Application configuration
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "CodeCC API Query"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Database (MongoDB)
    MONGODB_URI: str = "mongodb://localhost:27017"
    DEFECT_MONGODB_DB_NAME: str = "db_defect"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    MONGODB_SOCKET_TIMEOUT_MS: int = 30000
    # 0 leaves queries unbounded (client socket timeout still applies)
    MONGODB_QUERY_TIMEOUT_MS: int = 0

    # Max identifiers per $in list before queries are split; 0 disables splitting
    CODE_REPO_QUERY_CHUNK_SIZE: int = 1000

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
