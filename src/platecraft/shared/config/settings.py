from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General
    LOG_LEVEL: str = Field(default="INFO", description="Application log level")
    BIND: str = Field(default="0.0.0.0:3001", description="API bind address")
    SERVICE_NAME: str = Field(default="platecraft-image-generator", description="Name reported by the health check")

    # CORS
    CORS_ALLOW_ORIGINS: str = Field(default="*", description="Comma-separated list of allowed origins")
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="Allow credentials in CORS")
    CORS_ALLOW_METHODS: str = Field(default="*", description="Allowed CORS methods")
    CORS_ALLOW_HEADERS: str = Field(default="*", description="Allowed CORS headers")

    # Google Cloud
    GOOGLE_CLOUD_PROJECT_ID: str = Field(default="", description="Project ID; falls back to the credentials' project")
    GOOGLE_CREDENTIALS_BASE64: str = Field(default="", description="Base64-encoded service account JSON")

    # Vertex AI Imagen
    VERTEX_LOCATION: str = Field(default="us-central1", description="Vertex AI region")
    VERTEX_PUBLISHER: str = Field(default="google", description="Model publisher")
    IMAGEN_MODEL: str = Field(default="imagegeneration@006", description="Image generation model ID")
    IMAGEN_SAMPLE_COUNT: int = Field(default=1, description="Images generated per request")
    IMAGEN_ASPECT_RATIO: str = Field(default="1:1", description="Output aspect ratio")
    IMAGEN_SAFETY_FILTER_LEVEL: str = Field(default="block_some", description="Imagen safety filter level")
    IMAGEN_PERSON_GENERATION: str = Field(default="dont_allow", description="Imagen person generation policy")
    IMAGEN_REQUEST_TIMEOUT: int = Field(default=120, description="Imagen HTTP timeout (seconds)")
    IMAGEN_MAX_CONCURRENCY: int = Field(default=4, description="Maximum concurrent Imagen requests per worker")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
