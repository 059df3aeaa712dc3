"""
Configuration management for the blogql server
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphiql: bool = True  # Serve the GraphiQL IDE at /graphql

    # Store
    seed_demo_data: bool = True  # Start with the demo users, posts and comments

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "BLOGQL_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
