from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    AUTH_SECRET: str

    # identity baked into the public directory service token
    TOKEN_ISSUER: str = "espasyo-frontend"
    TOKEN_TTL_SECONDS: int = 3600
    SERVICE_SUBJECT: str = "public-directory-service"
    SERVICE_ROLE: str = "PUBLIC_API"
    SERVICE_EMAIL: str = "public-directory@espasyo.local"

    LOG_LEVEL: str = "INFO"

    # LocalStack defaults
    LOGS_ENDPOINT_URL: str = "http://localhost:4566"
    LOGS_REGION: str = "us-east-1"
    LOGS_ACCESS_KEY_ID: str = "test"
    LOGS_SECRET_ACCESS_KEY: str = "test"
    LOG_GROUP: str = "espasyo-frontend-dev"
    LOG_STREAM: str = "frontend-app"

    DASHBOARD_API_URL: str = "http://127.0.0.1:3000"
    REQUEST_TIMEOUT: int = 30

    class Config:
        env_file = ".env"
        extra = "ignore"
        frozen = True

settings = Settings()
