"""
IBM Cloud SDK client construction.

Both remote collaborators are built from the same configuration and share a
single IAM authenticator, so one API key exchange serves the share fetch and
the tag lookups.
"""

import logging
from typing import Optional

from ibm_cloud_sdk_core.authenticators import Authenticator, IAMAuthenticator
from ibm_platform_services import GlobalTaggingV1
from ibm_vpc import VpcV1

from ..config_manager import IBMCloudConfig, TimeoutConfig

logger = logging.getLogger(__name__)


def create_authenticator(config: IBMCloudConfig) -> Authenticator:
    """
    Create the IAM authenticator for the configured API key.

    Raises:
        MissingConfigurationError: If no API key is configured
    """
    config.validate()
    if config.iam_endpoint:
        return IAMAuthenticator(config.api_key, url=config.iam_endpoint)
    return IAMAuthenticator(config.api_key)


def create_vpc_client(
    config: IBMCloudConfig,
    authenticator: Authenticator,
    timeouts: Optional[TimeoutConfig] = None,
) -> VpcV1:
    """Create a VPC client bound to the configured regional endpoint."""
    client = VpcV1(version=config.vpc_api_version, authenticator=authenticator)
    client.set_service_url(config.vpc_endpoint)
    if timeouts is not None:
        client.set_http_config({"timeout": timeouts.http})
    logger.debug(f"VPC client created for {config.vpc_endpoint}")
    return client


def create_tagging_client(
    config: IBMCloudConfig,
    authenticator: Authenticator,
    timeouts: Optional[TimeoutConfig] = None,
) -> GlobalTaggingV1:
    """Create a Global Tagging client."""
    client = GlobalTaggingV1(authenticator=authenticator)
    client.set_service_url(config.tagging_endpoint)
    if timeouts is not None:
        client.set_http_config({"timeout": timeouts.http})
    logger.debug(f"Global tagging client created for {config.tagging_endpoint}")
    return client
