"""
Share Source Client

Fetches the source share of a replica file share from the IBM Cloud VPC API
and classifies every failure into the reader's exception hierarchy:
not-found, API error (a response with an error status) or transport failure
(no response at all).
"""

import asyncio
from typing import Any, Callable, Optional

import requests
import structlog
from ibm_cloud_sdk_core import ApiException

from ..config_manager import ShareSourceConfig
from ..exceptions import ShareTransportError, wrap_ibm_exception
from ..models.share_models import ShareDescription
from ..timeout_config import log_timeout_event
from .sdk_factory import create_authenticator, create_vpc_client

logger = structlog.get_logger(__name__)


class ShareSourceClient:
    """
    Remote entity client for ``GET /shares/{id}/source``.

    The blocking SDK call runs in a worker thread so the caller's deadline
    and cancellation apply to it.
    """

    def __init__(
        self,
        config: ShareSourceConfig,
        vpc_client: Optional[Any] = None,
        vpc_client_factory: Optional[Callable[[ShareSourceConfig], Any]] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Reader configuration
            vpc_client: Optional ready-made VpcV1 instance (for testing)
            vpc_client_factory: Optional factory building the VpcV1 instance
        """
        self.config = config
        self._vpc_client = vpc_client
        self.vpc_client_factory = vpc_client_factory or _default_vpc_client

    @property
    def vpc_client(self) -> Any:
        if self._vpc_client is None:
            self._vpc_client = self.vpc_client_factory(self.config)
        return self._vpc_client

    async def fetch(self, share_id: str) -> ShareDescription:
        """
        Fetch the source share of the replica share ``share_id``.

        Raises:
            ShareNotFoundError: The API answered 404
            ShareAPIError: The API answered with any other error status
            ShareTransportError: No response was received
        """
        timeout = self.config.timeouts.fetch
        logger.debug(f"Fetching source share for replica {share_id}")
        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(self.vpc_client.get_share_source, share_id=share_id),
                timeout=timeout,
            )
        except ApiException as e:
            logger.debug(f"GetShareSourceWithContext failed {e}\n{e.http_response}")
            raise wrap_ibm_exception(e, share_id=share_id) from e
        except asyncio.TimeoutError as e:
            log_timeout_event("get_share_source", timeout)
            raise ShareTransportError(
                f"Transport failure fetching source share: timed out after {timeout}s",
                share_id=share_id,
                timeout=timeout,
                cause=e,
            ) from e
        except requests.exceptions.RequestException as e:
            logger.debug(f"GetShareSourceWithContext failed {e}")
            raise ShareTransportError(
                f"Transport failure fetching source share: {e}",
                share_id=share_id,
                cause=e,
            ) from e

        return ShareDescription.from_dict(response.get_result() or {})


def _default_vpc_client(config: ShareSourceConfig) -> Any:
    authenticator = create_authenticator(config.ibmcloud)
    return create_vpc_client(config.ibmcloud, authenticator, config.timeouts)
