# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

import logging
import os

from dotenv import load_dotenv

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


load_dotenv()


class Config:
    """
    Configuration class for managing environment variables and application settings.
    Provides a centralized location for all configuration values.

    Environment Variables:
        app_id: Alexa skill application ID (default: amzn1.ask.skill.test)
        forecast_url: avalanche.org map layer URL
        cache_key: Key the forecast snapshot is stored under (default: forecasts)
        serve_stale: Serve expired forecasts when a refresh fails (default: true)
        DYNAMODB_PERSISTENCE_TABLE_NAME: DynamoDB table name (default: ask-{app_id})
        DYNAMODB_PERSISTENCE_REGION: AWS region (default: us-east-1)

    Example:
        Access configuration values:
            app_id = Config.APP_ID
            table_name = Config.DYNAMODB_TABLE_NAME
    """

    # Application identifiers
    APP_ID: str = os.environ.get("app_id", "amzn1.ask.skill.test")

    # Forecast source
    FORECAST_URL: str = os.environ.get(
        "forecast_url", "https://avalanche.org/wp-admin/admin-ajax.php?action=map_layer"
    )

    # DynamoDB settings
    DYNAMODB_TABLE_NAME: str = os.environ.get(
        "DYNAMODB_PERSISTENCE_TABLE_NAME", f"ask-{os.environ.get('app_id', 'test')}"
    )
    DYNAMODB_REGION: str = os.environ.get("DYNAMODB_PERSISTENCE_REGION", "us-east-1")

    # Cache settings
    CACHE_KEY: str = os.environ.get("cache_key", "forecasts")
    CACHE_TTL_HOURS: int = 10
    DEFAULT_CACHE_TTL_DAYS: int = 35
    SERVE_STALE_ON_ERROR: bool = os.environ.get("serve_stale", "true").lower() == "true"
    LOCAL_CACHE_DIR: str = os.environ.get("local_cache_dir", ".test_cache")

    # HTTP settings
    HTTP_TIMEOUT: int = 30

    @classmethod
    def validate(cls):
        """
        Validate required configuration values.

        Raises:
            ValueError: If required configuration is missing or invalid
        """
        # Check for required values in production (not in test mode)
        is_test_mode = os.environ.get("SKILLTEST", "").lower() == "true"

        if not is_test_mode:
            if not cls.APP_ID or cls.APP_ID == "amzn1.ask.skill.test":
                logger.warning("APP_ID not set or using test value")

            if not cls.FORECAST_URL:
                raise ValueError("FORECAST_URL must be set")

            if not cls.DYNAMODB_TABLE_NAME:
                raise ValueError("DYNAMODB_TABLE_NAME must be set")

            if not cls.DYNAMODB_REGION:
                raise ValueError("DYNAMODB_REGION must be set")

        logger.info("Configuration validated successfully")
