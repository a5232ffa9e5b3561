import copy
from typing import Any, Dict
from unittest.mock import Mock

import pytest

from vpc_share_source.config_manager import (
    IBMCloudConfig,
    LoggingConfig,
    ShareSourceConfig,
    TimeoutConfig,
)

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def config() -> ShareSourceConfig:
    """Provide a configuration that does not depend on the environment."""
    return ShareSourceConfig(
        ibmcloud=IBMCloudConfig(
            api_key="test-api-key-123456",  # pragma: allowlist secret
            region="us-south",
            vpc_endpoint=None,
            vpc_api_version="2024-04-30",
            tagging_endpoint="https://tags.global-search-tagging.cloud.ibm.com",
            iam_endpoint=None,
        ),
        timeouts=TimeoutConfig(fetch=5, tags=5, http=5),
        logging=LoggingConfig(level="INFO", format="%(message)s", file_output=None),
    )


# ============================================================================
# API Payload Fixtures
# ============================================================================

SHARE_CRN = "crn:v1:bluemix:public:is:us-south-1:a/123456::share:r006-src"

_SHARE_PAYLOAD: Dict[str, Any] = {
    "id": "r006-src",
    "crn": SHARE_CRN,
    "href": "https://us-south.iaas.cloud.ibm.com/v1/shares/r006-src",
    "name": "source-share",
    "created_at": "2024-03-01T10:00:00Z",
    "encryption": "provider_managed",
    "encryption_key": {"crn": "crn:v1:bluemix:public:kms:us-south:a/123456:key:k1"},
    "iops": 3000,
    "size": 200,
    "lifecycle_state": "stable",
    "resource_type": "share",
    "profile": {
        "href": "https://us-south.iaas.cloud.ibm.com/v1/share/profiles/dp2",
        "name": "dp2",
        "resource_type": "share_profile",
    },
    "zone": {
        "href": "https://us-south.iaas.cloud.ibm.com/v1/regions/us-south/zones/us-south-1",
        "name": "us-south-1",
    },
    "resource_group": {
        "href": "https://resource-controller.cloud.ibm.com/v2/resource_groups/rg1",
        "id": "rg1",
        "name": "default",
    },
    "latest_job": {
        "status": "succeeded",
        "status_reasons": [],
        "type": "replication_init",
    },
    "replica_share": {
        "crn": "crn:v1:bluemix:public:is:us-south-2:a/123456::share:r-1",
        "href": "https://us-south.iaas.cloud.ibm.com/v1/shares/r-1",
        "id": "r-1",
        "name": "rep",
        "resource_type": "share",
    },
    "replication_role": "source",
    "replication_status": "active",
    "replication_status_reasons": [],
    "mount_targets": [
        {
            "href": "https://us-south.iaas.cloud.ibm.com/v1/shares/r006-src/mount_targets/mt1",
            "id": "mt1",
            "name": "target-one",
            "resource_type": "share_target",
        },
        {
            "deleted": {"more_info": "https://cloud.ibm.com/apidocs/vpc#deleted-resources"},
            "href": "https://us-south.iaas.cloud.ibm.com/v1/shares/r006-src/mount_targets/mt2",
            "id": "mt2",
            "name": "target-two",
            "resource_type": "share_target",
        },
    ],
    "user_tags": ["env:test"],
}


@pytest.fixture
def share_payload() -> Dict[str, Any]:
    """Provide a fully populated source share response body."""
    return copy.deepcopy(_SHARE_PAYLOAD)


@pytest.fixture
def share_crn() -> str:
    return SHARE_CRN


def detailed_response(result: Any) -> Mock:
    """Build a stand-in for an SDK DetailedResponse."""
    response = Mock()
    response.get_result.return_value = result
    return response


@pytest.fixture
def mock_vpc_client(share_payload: Dict[str, Any]) -> Mock:
    """Provide a mock VpcV1 answering get_share_source with the payload."""
    client = Mock()
    client.get_share_source.return_value = detailed_response(share_payload)
    return client


@pytest.fixture
def mock_tagging_client() -> Mock:
    """Provide a mock GlobalTaggingV1 answering by tag type."""
    tags = {
        "user": ["env:test", "team:storage"],
        "access": ["project:alpha"],
    }

    def list_tags(**kwargs: Any) -> Mock:
        names = tags[kwargs["tag_type"]]
        return detailed_response(
            {
                "total_count": len(names),
                "offset": kwargs.get("offset", 0),
                "limit": kwargs.get("limit"),
                "items": [{"name": name} for name in names],
            }
        )

    client = Mock()
    client.list_tags.side_effect = list_tags
    return client


@pytest.fixture
def make_response():
    """Provide the DetailedResponse builder to tests."""
    return detailed_response
