"""Data models for VPC file shares as returned by the share source API.

The models are read-only projections of one API response. Enumerated fields
are kept as the raw strings the API sent: the VPC API documents that its
enumerations will expand, so each enum below only classifies values, it
never rejects them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Generic, List, Optional, Tuple, Type, TypeVar

E = TypeVar("E", bound="OpenEnum")


class OpenEnum(str, Enum):
    """Base for enumerations whose value set may grow server-side."""

    @classmethod
    def parse(cls: Type[E], value: Optional[str]) -> Optional[E]:
        """Return the known member for ``value``, or None if unrecognized."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def is_known(cls, value: Optional[str]) -> bool:
        return cls.parse(value) is not None


class LifecycleState(OpenEnum):
    DELETING = "deleting"
    FAILED = "failed"
    PENDING = "pending"
    STABLE = "stable"
    SUSPENDED = "suspended"
    UPDATING = "updating"
    WAITING = "waiting"


class JobStatus(OpenEnum):
    CANCELLED = "cancelled"
    FAILED = "failed"
    QUEUED = "queued"
    RUNNING = "running"
    SUCCEEDED = "succeeded"


class JobType(OpenEnum):
    REPLICATION_FAILOVER = "replication_failover"
    REPLICATION_INIT = "replication_init"
    REPLICATION_SPLIT = "replication_split"


class ReplicationRole(OpenEnum):
    NONE = "none"
    REPLICA = "replica"
    SOURCE = "source"


class ReplicationStatus(OpenEnum):
    ACTIVE = "active"
    FAILOVER_PENDING = "failover_pending"
    INITIALIZING = "initializing"
    NONE = "none"
    SPLIT_PENDING = "split_pending"


class StatusReasonCode(OpenEnum):
    CANNOT_INITIALIZE_REPLICATION = "cannot_initialize_replication"
    CANNOT_REACH_REPLICA_SHARE = "cannot_reach_replica_share"
    CANNOT_REACH_SOURCE_SHARE = "cannot_reach_source_share"


class Encryption(OpenEnum):
    PROVIDER_MANAGED = "provider_managed"
    USER_MANAGED = "user_managed"


@dataclass(frozen=True)
class DeletionMarker:
    """Present on a reference when the referenced resource has been deleted."""

    more_info: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeletionMarker":
        return cls(more_info=data.get("more_info"))


@dataclass(frozen=True)
class StatusReason:
    """A diagnostic code/message pair. ``code`` is an open set."""

    code: Optional[str] = None
    message: Optional[str] = None
    more_info: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatusReason":
        return cls(
            code=data.get("code"),
            message=data.get("message"),
            more_info=data.get("more_info"),
        )


def _status_reasons(items: Optional[List[Dict[str, Any]]]) -> Optional[List[StatusReason]]:
    if items is None:
        return None
    return [StatusReason.from_dict(item) for item in items]


class ReferencedKind:
    """Marker for the kind of resource a reference points at.

    ``attributes`` lists the fields a flattened reference of this kind
    carries, in output order. Kinds that are never flattened leave it empty.
    """

    resource_type: ClassVar[str] = ""
    attributes: ClassVar[Tuple[str, ...]] = ()


class ShareKind(ReferencedKind):
    resource_type = "share"
    attributes = ("crn", "deleted", "href", "id", "name", "resource_type")


class ShareTargetKind(ReferencedKind):
    resource_type = "share_target"
    attributes = ("deleted", "href", "id", "name", "resource_type")


class ZoneKind(ReferencedKind):
    resource_type = "zone"


class ShareProfileKind(ReferencedKind):
    resource_type = "share_profile"


class ResourceGroupKind(ReferencedKind):
    resource_type = "resource_group"


class EncryptionKeyKind(ReferencedKind):
    resource_type = "key"


K = TypeVar("K", bound=ReferencedKind)


@dataclass(frozen=True)
class ResourceReference(Generic[K]):
    """Weak reference to another resource.

    A reference never implies ownership. ``deleted`` is set whenever the API
    sent a ``deleted`` object, whatever its content.
    """

    id: Optional[str] = None
    crn: Optional[str] = None
    href: Optional[str] = None
    name: Optional[str] = None
    resource_type: Optional[str] = None
    deleted: Optional[DeletionMarker] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResourceReference[K]":
        deleted = data.get("deleted")
        return cls(
            id=data.get("id"),
            crn=data.get("crn"),
            href=data.get("href"),
            name=data.get("name"),
            resource_type=data.get("resource_type"),
            deleted=DeletionMarker.from_dict(deleted) if deleted is not None else None,
        )


ShareReference = ResourceReference[ShareKind]
MountTargetReference = ResourceReference[ShareTargetKind]
ZoneReference = ResourceReference[ZoneKind]
ProfileReference = ResourceReference[ShareProfileKind]
ResourceGroupReference = ResourceReference[ResourceGroupKind]
EncryptionKeyReference = ResourceReference[EncryptionKeyKind]


def _reference(data: Optional[Dict[str, Any]]) -> Optional[ResourceReference[Any]]:
    if data is None:
        return None
    return ResourceReference.from_dict(data)


@dataclass(frozen=True)
class LatestJob:
    """The latest job run against a share. Absent until a job has run."""

    status: Optional[str] = None
    type: Optional[str] = None
    status_reasons: Optional[List[StatusReason]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LatestJob":
        return cls(
            status=data.get("status"),
            type=data.get("type"),
            status_reasons=_status_reasons(data.get("status_reasons")),
        )


@dataclass(frozen=True)
class ShareDescription:
    """A file share as described by the VPC API.

    Attributes:
        id: Unique identifier of the share
        crn: CRN of the share, the join key for global tagging
        created_at: Creation timestamp exactly as sent by the API
        lifecycle_state: Raw lifecycle state (see ``LifecycleState``)
        replication_role: Raw role (see ``ReplicationRole``)
        replication_status: Raw status (see ``ReplicationStatus``)
        mount_targets: Share targets, in API order
    """

    id: Optional[str] = None
    crn: Optional[str] = None
    href: Optional[str] = None
    name: Optional[str] = None
    created_at: Optional[str] = None
    encryption: Optional[str] = None
    encryption_key: Optional[EncryptionKeyReference] = None
    iops: Optional[int] = None
    size: Optional[int] = None
    lifecycle_state: Optional[str] = None
    resource_type: Optional[str] = None
    profile: Optional[ProfileReference] = None
    zone: Optional[ZoneReference] = None
    resource_group: Optional[ResourceGroupReference] = None
    latest_job: Optional[LatestJob] = None
    replica_share: Optional[ShareReference] = None
    source_share: Optional[ShareReference] = None
    replication_cron_spec: Optional[str] = None
    replication_role: Optional[str] = None
    replication_status: Optional[str] = None
    replication_status_reasons: Optional[List[StatusReason]] = None
    mount_targets: Optional[List[MountTargetReference]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShareDescription":
        """Build a description from the JSON body of a share response."""
        latest_job = data.get("latest_job")
        mount_targets = data.get("mount_targets")
        return cls(
            id=data.get("id"),
            crn=data.get("crn"),
            href=data.get("href"),
            name=data.get("name"),
            created_at=data.get("created_at"),
            encryption=data.get("encryption"),
            encryption_key=_reference(data.get("encryption_key")),
            iops=data.get("iops"),
            size=data.get("size"),
            lifecycle_state=data.get("lifecycle_state"),
            resource_type=data.get("resource_type"),
            profile=_reference(data.get("profile")),
            zone=_reference(data.get("zone")),
            resource_group=_reference(data.get("resource_group")),
            latest_job=LatestJob.from_dict(latest_job) if latest_job is not None else None,
            replica_share=_reference(data.get("replica_share")),
            source_share=_reference(data.get("source_share")),
            replication_cron_spec=data.get("replication_cron_spec"),
            replication_role=data.get("replication_role"),
            replication_status=data.get("replication_status"),
            replication_status_reasons=_status_reasons(
                data.get("replication_status_reasons")
            ),
            mount_targets=(
                [ResourceReference.from_dict(item) for item in mount_targets]
                if mount_targets is not None
                else None
            ),
        )

    def unrecognized_enumerants(self) -> List[Tuple[str, str]]:
        """Return ``(field, value)`` pairs the known enumerations do not cover."""
        checks: List[Tuple[str, Optional[str], Type[OpenEnum]]] = [
            ("lifecycle_state", self.lifecycle_state, LifecycleState),
            ("encryption", self.encryption, Encryption),
            ("replication_role", self.replication_role, ReplicationRole),
            ("replication_status", self.replication_status, ReplicationStatus),
        ]
        if self.latest_job is not None:
            checks.append(("latest_job.status", self.latest_job.status, JobStatus))
            checks.append(("latest_job.type", self.latest_job.type, JobType))
            for reason in self.latest_job.status_reasons or []:
                checks.append(
                    ("latest_job.status_reasons.code", reason.code, StatusReasonCode)
                )
        for reason in self.replication_status_reasons or []:
            checks.append(
                ("replication_status_reasons.code", reason.code, StatusReasonCode)
            )
        return [
            (name, value)
            for name, value, enum_cls in checks
            if value is not None and not enum_cls.is_known(value)
        ]
