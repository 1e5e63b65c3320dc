"""
Configuration settings for the furniture recommendation engine
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "Furnirank"
    version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    log_dir: str = "logs"

    class Config:
        env_prefix = "FURNIRANK_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env


class ScoringSettings(BaseSettings):
    """Tunable limits and history weights used by the rankers"""

    # Result caps
    max_recommendations: int = Field(default=20, ge=1)
    similar_items_limit: int = Field(default=5, ge=1)
    complementary_items_limit: int = Field(default=5, ge=1)
    trending_limit: int = Field(default=20, ge=1)

    # Similarity cut-off (strictly greater than)
    similarity_threshold: float = Field(default=0.3, ge=0.0)

    # Preference accumulation weights
    favorite_weight: float = Field(default=2.0, ge=0.0)
    recent_weight: float = Field(default=1.0, ge=0.0)

    # Catalog store
    max_recent_items: int = Field(default=20, ge=1)
    max_featured_items: int = Field(default=10, ge=0)

    class Config:
        env_prefix = "FURNIRANK_SCORING_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instances
settings = Settings()
scoring_settings = ScoringSettings()
