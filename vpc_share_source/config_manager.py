import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .exceptions import InvalidConfigurationError, MissingConfigurationError
from .timeout_config import Timeouts

# Load environment variables
load_dotenv(override=False)

"""
Configuration Management for the VPC source share reader

This module provides centralized configuration management with validation
and environment variable handling for the IBM Cloud endpoints, timeouts and
logging.
"""

DEFAULT_REGION = "us-south"
DEFAULT_VPC_API_VERSION = "2024-04-30"
DEFAULT_TAGGING_ENDPOINT = "https://tags.global-search-tagging.cloud.ibm.com"


def _set_sdk_http_log_level(log_level: str) -> None:
    """Set log levels for HTTP-related loggers to reduce noise."""
    http_loggers = [
        "ibm_cloud_sdk_core",
        "ibm_vpc",
        "ibm_platform_services",
        "urllib3",
        "urllib3.connectionpool",
        "requests",
        "requests.packages.urllib3",
        "http.client",
    ]
    # HTTP logging should only appear at DEBUG level
    target_level = logging.DEBUG if log_level == "DEBUG" else logging.WARNING
    for name in http_loggers:
        logging.getLogger(name).setLevel(target_level)


logger = logging.getLogger(__name__)


@dataclass
class IBMCloudConfig:
    """Configuration for the IBM Cloud VPC and Global Tagging endpoints."""

    api_key: str = field(default_factory=lambda: os.getenv("IBMCLOUD_API_KEY", ""))
    region: str = field(
        default_factory=lambda: os.getenv("IBMCLOUD_REGION", DEFAULT_REGION)
    )
    vpc_endpoint: Optional[str] = field(
        default_factory=lambda: os.getenv("IBMCLOUD_VPC_ENDPOINT")
    )
    vpc_api_version: str = field(
        default_factory=lambda: os.getenv(
            "IBMCLOUD_VPC_API_VERSION", DEFAULT_VPC_API_VERSION
        )
    )
    tagging_endpoint: str = field(
        default_factory=lambda: os.getenv(
            "IBMCLOUD_TAGGING_ENDPOINT", DEFAULT_TAGGING_ENDPOINT
        )
    )
    iam_endpoint: Optional[str] = field(
        default_factory=lambda: os.getenv("IBMCLOUD_IAM_ENDPOINT")
    )

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.region:
            raise InvalidConfigurationError(
                "IBM Cloud region is required", config_section="ibmcloud"
            )
        if not self.vpc_endpoint:
            self.vpc_endpoint = f"https://{self.region}.iaas.cloud.ibm.com/v1"
        for name, url in (
            ("vpc_endpoint", self.vpc_endpoint),
            ("tagging_endpoint", self.tagging_endpoint),
        ):
            if not url.startswith("https://"):
                raise InvalidConfigurationError(
                    f"IBM Cloud {name} must use HTTPS: {url}",
                    config_section="ibmcloud",
                )

    def is_configured(self) -> bool:
        """Check if an API key is available."""
        return bool(self.api_key)

    def validate(self) -> None:
        """Validate that credentials are present."""
        if not self.is_configured():
            raise MissingConfigurationError(
                "IBM Cloud API key is not configured",
                missing_keys=["IBMCLOUD_API_KEY"],
            )

    def get_safe_api_key(self) -> str:
        """Get API key for logging (masked for security)."""
        if len(self.api_key) > 8:
            return f"{self.api_key[:4]}...{self.api_key[-4:]}"
        return "Not configured" if not self.api_key else "****"


@dataclass
class TimeoutConfig:
    """Deadlines applied to the remote calls of one read."""

    fetch: float = field(default_factory=lambda: Timeouts.SHARE_FETCH)
    tags: float = field(default_factory=lambda: Timeouts.TAG_LOOKUP)
    http: float = field(default_factory=lambda: Timeouts.HTTP)

    def __post_init__(self) -> None:
        if self.fetch <= 0 or self.tags <= 0 or self.http <= 0:
            raise InvalidConfigurationError(
                "Timeouts must be positive", config_section="timeouts"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    format: str = field(
        default_factory=lambda: os.getenv(
            "LOG_FORMAT", "%(levelname)s:%(name)s:%(message)s"
        )
    )
    file_output: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE"))

    def __post_init__(self) -> None:
        """Validate logging configuration."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.level.upper() not in valid_levels:
            raise InvalidConfigurationError(
                f"Log level must be one of: {valid_levels}", config_section="logging"
            )
        self.level = self.level.upper()

    def get_log_level(self) -> int:
        """Convert string log level to logging constant."""
        return int(getattr(logging, self.level))


@dataclass
class ShareSourceConfig:
    """Main configuration class that aggregates all configuration sections."""

    ibmcloud: IBMCloudConfig = field(default_factory=IBMCloudConfig)
    timeouts: TimeoutConfig = field(default_factory=TimeoutConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_environment(
        cls,
        region: Optional[str] = None,
        log_level: Optional[str] = None,
        fetch_timeout: Optional[float] = None,
        tags_timeout: Optional[float] = None,
    ) -> "ShareSourceConfig":
        """
        Create configuration from environment variables.

        Args:
            region: Optional region overriding IBMCLOUD_REGION
            log_level: Optional log level overriding LOG_LEVEL
            fetch_timeout: Optional share fetch timeout in seconds
            tags_timeout: Optional per-query tag lookup timeout in seconds

        Returns:
            ShareSourceConfig: Configured instance
        """
        ibmcloud = IBMCloudConfig(region=region) if region else IBMCloudConfig()
        timeouts = TimeoutConfig()
        if fetch_timeout is not None:
            timeouts.fetch = fetch_timeout
        if tags_timeout is not None:
            timeouts.tags = tags_timeout
        logging_config = (
            LoggingConfig(level=log_level) if log_level else LoggingConfig()
        )
        return cls(ibmcloud=ibmcloud, timeouts=timeouts, logging=logging_config)

    def validate_all(self) -> None:
        """Validate all configuration sections."""
        try:
            self.ibmcloud.__post_init__()
            self.ibmcloud.validate()
            self.timeouts.__post_init__()
            self.logging.__post_init__()
            logger.info("✅ Configuration validation successful")
        except Exception as e:
            logger.exception(f"❌ Configuration validation failed: {e}")
            raise

    def log_configuration_summary(self) -> None:
        """Log a summary of the current configuration (without sensitive data)."""
        logger.debug("=" * 60)
        logger.debug("🔧 VPC SOURCE SHARE READER CONFIGURATION")
        logger.debug("=" * 60)
        logger.debug(f"🌍 Region: {self.ibmcloud.region}")
        logger.debug(f"   VPC Endpoint: {self.ibmcloud.vpc_endpoint}")
        logger.debug(f"   VPC API Version: {self.ibmcloud.vpc_api_version}")
        logger.debug(f"   Tagging Endpoint: {self.ibmcloud.tagging_endpoint}")
        logger.debug(f"🔑 API Key: {self.ibmcloud.get_safe_api_key()}")
        logger.debug("⏱️  Timeouts:")
        logger.debug(f"   - Fetch: {self.timeouts.fetch}s")
        logger.debug(f"   - Tags: {self.timeouts.tags}s")
        logger.debug(f"📝 Logging Level: {self.logging.level}")
        if self.logging.file_output:
            logger.debug(f"📄 Log File: {self.logging.file_output}")
        logger.debug("=" * 60)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "ibmcloud": {
                "region": self.ibmcloud.region,
                "vpc_endpoint": self.ibmcloud.vpc_endpoint,
                "vpc_api_version": self.ibmcloud.vpc_api_version,
                "tagging_endpoint": self.ibmcloud.tagging_endpoint,
                "iam_endpoint": self.ibmcloud.iam_endpoint,
                "configured": self.ibmcloud.is_configured(),
                # Don't include the API key in serialization
            },
            "timeouts": {
                "fetch": self.timeouts.fetch,
                "tags": self.timeouts.tags,
                "http": self.timeouts.http,
            },
            "logging": {
                "level": self.logging.level,
                "file_output": self.logging.file_output,
            },
        }


def setup_logging(config: LoggingConfig) -> None:
    """
    Setup logging configuration based on config.
    """
    _set_sdk_http_log_level(config.level.upper())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(config.get_log_level())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(config.format))
    root_logger.addHandler(console_handler)

    if config.file_output:
        file_handler = logging.FileHandler(config.file_output)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s:%(name)s:%(message)s")
        )
        root_logger.addHandler(file_handler)

    logger.info(
        f"📝 Logging configured: level={config.level}, file={config.file_output or 'console'}"
    )


def create_config_from_env(
    region: Optional[str] = None,
    log_level: Optional[str] = None,
    fetch_timeout: Optional[float] = None,
    tags_timeout: Optional[float] = None,
) -> ShareSourceConfig:
    """
    Factory function to create and validate configuration from environment.

    Raises:
        ConfigurationError: If configuration is invalid or incomplete
    """
    config = ShareSourceConfig.from_environment(
        region, log_level, fetch_timeout, tags_timeout
    )
    config.validate_all()
    return config
