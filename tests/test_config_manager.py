import logging
from unittest.mock import patch

import pytest

from vpc_share_source.config_manager import (
    IBMCloudConfig,
    LoggingConfig,
    ShareSourceConfig,
    TimeoutConfig,
    create_config_from_env,
    setup_logging,
)
from vpc_share_source.exceptions import (
    InvalidConfigurationError,
    MissingConfigurationError,
)


class TestIBMCloudConfig:
    def test_vpc_endpoint_derived_from_region(self):
        config = IBMCloudConfig(api_key="k", region="eu-de", vpc_endpoint=None)
        assert config.vpc_endpoint == "https://eu-de.iaas.cloud.ibm.com/v1"

    def test_explicit_endpoint_kept(self):
        config = IBMCloudConfig(
            api_key="k", vpc_endpoint="https://private.us-south.iaas.cloud.ibm.com/v1"
        )
        assert config.vpc_endpoint.startswith("https://private.")

    def test_http_endpoint_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            IBMCloudConfig(api_key="k", vpc_endpoint="http://insecure/v1")

    def test_missing_api_key(self):
        config = IBMCloudConfig(api_key="", vpc_endpoint=None)
        assert not config.is_configured()
        with pytest.raises(MissingConfigurationError) as exc_info:
            config.validate()
        assert "IBMCLOUD_API_KEY" in str(exc_info.value)

    def test_api_key_masked(self):
        config = IBMCloudConfig(api_key="abcd1234567890wxyz", vpc_endpoint=None)
        assert config.get_safe_api_key() == "abcd...wxyz"


class TestShareSourceConfig:
    def test_from_environment(self):
        env = {
            "IBMCLOUD_API_KEY": "env-key-0000000",  # pragma: allowlist secret
            "IBMCLOUD_REGION": "jp-tok",
            "LOG_LEVEL": "debug",
        }
        with patch.dict("os.environ", env, clear=False):
            config = ShareSourceConfig.from_environment(fetch_timeout=12)

        assert config.ibmcloud.region == "jp-tok"
        assert config.ibmcloud.vpc_endpoint.startswith("https://jp-tok.")
        assert config.logging.level == "DEBUG"
        assert config.timeouts.fetch == 12

    def test_to_dict_excludes_api_key(self, config):
        data = config.to_dict()
        assert "api_key" not in data["ibmcloud"]
        assert config.ibmcloud.api_key not in str(data)
        assert data["ibmcloud"]["configured"] is True

    def test_create_config_requires_api_key(self):
        with patch.dict("os.environ", {"IBMCLOUD_API_KEY": ""}, clear=False):
            with pytest.raises(MissingConfigurationError):
                create_config_from_env()

    def test_invalid_log_level(self):
        with pytest.raises(InvalidConfigurationError):
            LoggingConfig(level="LOUD")

    def test_non_positive_timeout(self):
        with pytest.raises(InvalidConfigurationError):
            TimeoutConfig(fetch=0, tags=1, http=1)


def test_setup_logging_quiets_sdk_loggers(tmp_path):
    log_file = tmp_path / "reader.log"
    setup_logging(LoggingConfig(level="INFO", file_output=str(log_file)))

    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("ibm_cloud_sdk_core").level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING
    assert log_file.exists()


def test_configuration_summary_is_debug_only(config, caplog):
    with caplog.at_level(logging.DEBUG, logger="vpc_share_source.config_manager"):
        config.log_configuration_summary()

    assert caplog.records
    assert all(record.levelno == logging.DEBUG for record in caplog.records)
    assert config.ibmcloud.api_key not in caplog.text
    assert config.ibmcloud.get_safe_api_key() in caplog.text
