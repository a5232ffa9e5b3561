"""
Source Share Reader

Reads the source share of a replica file share and projects it into the flat
attribute set of the ``is_source_share`` data source.

A read either completes with every available attribute assigned, completes
with an empty identity when the share does not exist, or raises. Failures
never leave a partially populated attribute set behind: attributes are
assigned into a fresh container that is only returned on success.
"""

from typing import Any, Callable, List, Optional, Protocol, Tuple

import structlog

from ..exceptions import (
    FieldAssignmentError,
    InvalidShareIdentifierError,
    SchemaTypeError,
    ShareNotFoundError,
)
from ..flatten import (
    flatten_latest_job,
    flatten_mount_targets,
    flatten_share_reference,
    flatten_status_reasons,
)
from ..models.share_models import ShareDescription
from ..schema import ACCESS_TAGS, USER_TAGS, AttributeSet
from .tag_augmentation import TagLister, TagSet, fetch_tag_set

logger = structlog.get_logger(__name__)


class ShareFetcher(Protocol):
    async def fetch(self, share_id: str) -> ShareDescription: ...


def _optional(value: Any, projection: Callable[[Any], Any]) -> Any:
    return projection(value) if value is not None else None


def project_share(share: ShareDescription) -> List[Tuple[str, Any]]:
    """
    Return ``(attribute, value)`` pairs for every attribute of ``share``.

    Optional nested records map to None when absent, which leaves the
    attribute unset. The order matches the order of assignment.
    """
    return [
        ("created_at", share.created_at),
        ("crn", share.crn),
        ("encryption", share.encryption),
        ("encryption_key", _optional(share.encryption_key, lambda key: key.crn)),
        ("href", share.href),
        ("iops", share.iops),
        ("latest_job", _optional(share.latest_job, flatten_latest_job)),
        ("lifecycle_state", share.lifecycle_state),
        ("name", share.name),
        ("profile", _optional(share.profile, lambda profile: profile.name)),
        ("replica_share", _optional(share.replica_share, flatten_share_reference)),
        ("replication_cron_spec", share.replication_cron_spec),
        ("replication_role", share.replication_role),
        ("replication_status", share.replication_status),
        (
            "replication_status_reasons",
            _optional(share.replication_status_reasons, flatten_status_reasons),
        ),
        ("resource_group", _optional(share.resource_group, lambda group: group.id)),
        ("resource_type", share.resource_type),
        ("size", share.size),
        ("source_share", _optional(share.source_share, flatten_share_reference)),
        ("share_targets", _optional(share.mount_targets, flatten_mount_targets)),
        ("zone", _optional(share.zone, lambda zone: zone.name)),
    ]


class SourceShareReader:
    """
    Projection orchestrator for the source share data source.

    Collaborators are injected: ``client`` fetches the share and
    ``tag_service`` answers tag lookups by CRN.
    """

    def __init__(self, client: ShareFetcher, tag_service: TagLister) -> None:
        self.client = client
        self.tag_service = tag_service

    async def read(
        self, share_replica: str, state: Optional[AttributeSet] = None
    ) -> AttributeSet:
        """
        Read the source share of ``share_replica``.

        Args:
            share_replica: Identifier of the replica file share
            state: Previously read attribute set, if any. On not-found its
                identity is cleared and it is returned unchanged otherwise.

        Returns:
            AttributeSet: The populated attribute set, or an attribute set
            with an empty identity if the share does not exist

        Raises:
            InvalidShareIdentifierError: If ``share_replica`` is empty
            ShareAPIError: If the API answered with a non-404 error
            ShareTransportError: If no response was received
            FieldAssignmentError: If an attribute could not be assigned
        """
        if not isinstance(share_replica, str) or not share_replica.strip():
            raise InvalidShareIdentifierError(
                "share_replica must be a non-empty string"
            )

        try:
            share = await self.client.fetch(share_replica)
        except ShareNotFoundError as e:
            logger.info(
                f"Source share for replica {share_replica} not found: {e.message}"
            )
            result = state if state is not None else AttributeSet()
            result.set_id("")
            return result

        attributes = AttributeSet()
        self._assign(attributes, "share_replica", share_replica)
        attributes.set_id(share.id)

        self._log_unrecognized(share)
        for name, value in project_share(share):
            self._assign(attributes, name, value)

        tags = await fetch_tag_set(self.tag_service, share.crn, share_id=attributes.id)
        self._merge_tags(attributes, tags)

        if tags.failed:
            degraded = ", ".join(sorted(tag_type.value for tag_type in tags.failed))
            logger.info(
                f"⚠️ Read source share {attributes.id} for replica {share_replica} "
                f"({len(attributes.keys())} attributes, {degraded} tags unavailable)"
            )
        else:
            logger.info(
                f"✅ Read source share {attributes.id} for replica {share_replica} "
                f"({len(attributes.keys())} attributes)"
            )
        return attributes

    @staticmethod
    def _assign(attributes: AttributeSet, name: str, value: Any) -> None:
        try:
            attributes.set(name, value)
        except SchemaTypeError as e:
            raise FieldAssignmentError(name, cause=e) from e

    @staticmethod
    def _merge_tags(attributes: AttributeSet, tags: TagSet) -> None:
        for name, values in (
            (USER_TAGS, tags.user_tags),
            (ACCESS_TAGS, tags.access_tags),
        ):
            try:
                attributes.set(name, values)
            except SchemaTypeError as e:
                logger.warning(
                    f"Discarding malformed {name} for share {attributes.id}: {e}"
                )
                attributes.set(name, frozenset())

    @staticmethod
    def _log_unrecognized(share: ShareDescription) -> None:
        for name, value in share.unrecognized_enumerants():
            logger.warning(
                f"Unrecognized {name} value {value!r} on share {share.id}, passing through"
            )
