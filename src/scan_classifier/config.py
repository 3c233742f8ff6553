"""
Configuration settings for the Scan Classifier service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Scan Classifier"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"  # development | production

    # === Bundled artifacts ===
    MODEL_PATH: str = "assets/model_main.tflite"
    VOCAB_PATH: str = "assets/tfidf_vocab.json"
    LABELS_PATH: str = "assets/labels.json"

    # === Classification ===
    FEATURE_VECTOR_SIZE: int = 1000  # Must match the model input dimensionality
    UNKNOWN_LABEL: str = "Unknown"
    INFERENCE_NUM_THREADS: Optional[int] = None  # None lets TFLite decide

    # === OCR (Tesseract) ===
    OCR_LANGUAGE: str = "eng"
    OCR_TESSERACT_CMD: Optional[str] = None  # Path to tesseract binary if not on PATH
    OCR_TIMEOUT: int = 30  # seconds, 0 disables the timeout
    OCR_CONFIG: str = ""  # Extra tesseract flags, e.g. "--psm 6"

    # === Startup ===
    STARTUP_FAIL_FAST: bool = True  # Abort startup if the model or labels cannot be loaded

    # === HTTP ===
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024  # 10 MiB

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
