import os


class Settings:
    def __init__(self):
        self.app_name = "Login Route Service"
        self.api_version = "1.0.0"
        self.environment = os.getenv("LOGINROUTE_ENVIRONMENT", "development")
        self.secret_key = os.getenv("LOGINROUTE_SECRET_KEY", "CHANGE_ME")
        self.SECRET_KEY = self.secret_key
        self.access_token_expire_minutes = int(os.getenv("LOGINROUTE_ACCESS_TOKEN_EXPIRE_MINUTES", "30"))
        self.ACCESS_TOKEN_EXPIRE_MINUTES = self.access_token_expire_minutes
        self.database_url = os.getenv("LOGINROUTE_DATABASE_URL", "sqlite:///./loginroute.db")
        self.cors_origins = [
            origin.strip()
            for origin in os.getenv("LOGINROUTE_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
            if origin.strip()
        ]
        self.log_level = os.getenv("LOGINROUTE_LOG_LEVEL", "INFO").upper()


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
