"""
Configuration management for the Dialogflow webhook.

Loads environment variables from .env file and provides typed access to configuration.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


class Config:
    """Configuration class for the Dialogflow webhook."""

    # Listener
    WEBHOOK_HOST = os.getenv("WEBHOOK_HOST", "0.0.0.0")
    WEBHOOK_PORT = int(os.getenv("WEBHOOK_PORT", "8082"))

    # Environment
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> bool:
        """Validate that configuration is usable."""
        if not 0 < cls.WEBHOOK_PORT < 65536:
            raise ValueError(f"WEBHOOK_PORT out of range: {cls.WEBHOOK_PORT}")
        return True


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    print(f"  Listen: {Config.WEBHOOK_HOST}:{Config.WEBHOOK_PORT}")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"  Log level: {Config.LOG_LEVEL}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
