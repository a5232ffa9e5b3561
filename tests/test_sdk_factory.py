from unittest.mock import Mock, patch

import pytest

from vpc_share_source.exceptions import MissingConfigurationError
from vpc_share_source.services.sdk_factory import (
    create_authenticator,
    create_tagging_client,
    create_vpc_client,
)


def test_authenticator_requires_api_key(config):
    config.ibmcloud.api_key = ""
    with pytest.raises(MissingConfigurationError):
        create_authenticator(config.ibmcloud)


@patch("vpc_share_source.services.sdk_factory.IAMAuthenticator")
def test_authenticator_uses_custom_iam_endpoint(mock_iam, config):
    config.ibmcloud.iam_endpoint = "https://private.iam.cloud.ibm.com"
    create_authenticator(config.ibmcloud)
    mock_iam.assert_called_once_with(
        config.ibmcloud.api_key, url="https://private.iam.cloud.ibm.com"
    )


@patch("vpc_share_source.services.sdk_factory.VpcV1")
def test_vpc_client_bound_to_region(mock_vpc, config):
    authenticator = Mock()
    client = create_vpc_client(config.ibmcloud, authenticator, config.timeouts)

    mock_vpc.assert_called_once_with(
        version="2024-04-30", authenticator=authenticator
    )
    client.set_service_url.assert_called_once_with(
        "https://us-south.iaas.cloud.ibm.com/v1"
    )
    client.set_http_config.assert_called_once_with({"timeout": 5})


@patch("vpc_share_source.services.sdk_factory.GlobalTaggingV1")
def test_tagging_client_endpoint(mock_tagging, config):
    client = create_tagging_client(config.ibmcloud, Mock())
    client.set_service_url.assert_called_once_with(
        "https://tags.global-search-tagging.cloud.ibm.com"
    )
    client.set_http_config.assert_not_called()
