"""
Global Tagging Service

Lists the tags attached to a resource CRN through IBM Cloud Global Tagging.
"""

import asyncio
from enum import Enum
from typing import Any, Callable, Dict, Optional, Set

import requests
import structlog
from ibm_cloud_sdk_core import ApiException

from ..config_manager import ShareSourceConfig
from ..exceptions import TagLookupError
from .sdk_factory import create_authenticator, create_tagging_client

logger = structlog.get_logger(__name__)

# Maximum page size accepted by the list tags API
PAGE_LIMIT = 1000


class TagType(str, Enum):
    USER = "user"
    ACCESS = "access"


class GlobalTagService:
    """Tag service keyed by CRN, one query per tag namespace."""

    def __init__(
        self,
        config: ShareSourceConfig,
        tagging_client: Optional[Any] = None,
        tagging_client_factory: Optional[Callable[[ShareSourceConfig], Any]] = None,
    ) -> None:
        self.config = config
        self._tagging_client = tagging_client
        self.tagging_client_factory = tagging_client_factory or _default_tagging_client

    @property
    def tagging_client(self) -> Any:
        if self._tagging_client is None:
            self._tagging_client = self.tagging_client_factory(self.config)
        return self._tagging_client

    def _list_all(self, crn: str, tag_type: TagType) -> Set[str]:
        tags: Set[str] = set()
        offset = 0
        while True:
            response = self.tagging_client.list_tags(
                attached_to=crn,
                tag_type=tag_type.value,
                providers=["ghost"],
                offset=offset,
                limit=PAGE_LIMIT,
            )
            result: Dict[str, Any] = response.get_result() or {}
            items = result.get("items") or []
            tags.update(item["name"] for item in items if item.get("name"))
            offset += len(items)
            if not items or offset >= int(result.get("total_count") or 0):
                return tags

    async def list_tags(self, crn: str, tag_type: TagType) -> Set[str]:
        """
        List tag names of ``tag_type`` attached to ``crn``.

        Raises:
            TagLookupError: If the query fails or times out
        """
        timeout = self.config.timeouts.tags
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._list_all, crn, tag_type), timeout=timeout
            )
        except ApiException as e:
            raise TagLookupError(
                f"Listing {tag_type.value} tags failed: {e.message}",
                crn=crn,
                tag_type=tag_type.value,
                context={"status_code": e.status_code},
                cause=e,
            ) from e
        except asyncio.TimeoutError as e:
            raise TagLookupError(
                f"Listing {tag_type.value} tags timed out after {timeout}s",
                crn=crn,
                tag_type=tag_type.value,
                cause=e,
            ) from e
        except requests.exceptions.RequestException as e:
            raise TagLookupError(
                f"Listing {tag_type.value} tags failed: {e}",
                crn=crn,
                tag_type=tag_type.value,
                cause=e,
            ) from e


def _default_tagging_client(config: ShareSourceConfig) -> Any:
    authenticator = create_authenticator(config.ibmcloud)
    return create_tagging_client(config.ibmcloud, authenticator, config.timeouts)
