"""Models module for the VPC source share reader."""

from .share_models import (
    DeletionMarker,
    Encryption,
    JobStatus,
    JobType,
    LatestJob,
    LifecycleState,
    MountTargetReference,
    OpenEnum,
    ReplicationRole,
    ReplicationStatus,
    ResourceReference,
    ShareDescription,
    ShareKind,
    ShareReference,
    ShareTargetKind,
    StatusReason,
    StatusReasonCode,
)

__all__ = [
    "DeletionMarker",
    "Encryption",
    "JobStatus",
    "JobType",
    "LatestJob",
    "LifecycleState",
    "MountTargetReference",
    "OpenEnum",
    "ReplicationRole",
    "ReplicationStatus",
    "ResourceReference",
    "ShareDescription",
    "ShareKind",
    "ShareReference",
    "ShareTargetKind",
    "StatusReason",
    "StatusReasonCode",
]
