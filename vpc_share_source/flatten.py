"""
Flattening of nested share sub-objects.

Each function turns one nested API object into the list-of-mappings form the
attribute schema stores for nested blocks: an optional record becomes a
one-element list, a list of records keeps its element order. Keys whose
source value is absent are omitted rather than zero-filled. The functions
are pure and never reject unrecognized enumerated values.
"""

from typing import Any, Dict, List, Optional, Sequence, Type

from .models.share_models import (
    DeletionMarker,
    LatestJob,
    MountTargetReference,
    ReferencedKind,
    ResourceReference,
    ShareKind,
    ShareReference,
    ShareTargetKind,
    StatusReason,
)

FlatRecord = Dict[str, Any]


def _put(record: FlatRecord, key: str, value: Any) -> None:
    if value is not None:
        record[key] = value


def flatten_deleted(marker: DeletionMarker) -> List[FlatRecord]:
    """Presence of the marker is what matters; an empty record is still kept."""
    record: FlatRecord = {}
    _put(record, "more_info", marker.more_info)
    return [record]


def status_reason_to_map(reason: StatusReason) -> FlatRecord:
    record: FlatRecord = {}
    _put(record, "code", reason.code)
    _put(record, "message", reason.message)
    _put(record, "more_info", reason.more_info)
    return record


def flatten_status_reasons(
    reasons: Optional[Sequence[StatusReason]],
) -> List[FlatRecord]:
    return [status_reason_to_map(reason) for reason in reasons or []]


def reference_to_map(
    reference: ResourceReference[Any], kind: Type[ReferencedKind]
) -> FlatRecord:
    """Map a reference using the attribute list declared by its kind."""
    record: FlatRecord = {}
    for attribute in kind.attributes:
        if attribute == "deleted":
            if reference.deleted is not None:
                record["deleted"] = flatten_deleted(reference.deleted)
            continue
        _put(record, attribute, getattr(reference, attribute))
    return record


def flatten_share_reference(reference: ShareReference) -> List[FlatRecord]:
    """Flatten ``replica_share`` or ``source_share``."""
    return [reference_to_map(reference, ShareKind)]


def flatten_mount_targets(
    targets: Optional[Sequence[MountTargetReference]],
) -> List[FlatRecord]:
    return [reference_to_map(target, ShareTargetKind) for target in targets or []]


def flatten_latest_job(job: LatestJob) -> List[FlatRecord]:
    record: FlatRecord = {}
    _put(record, "status", job.status)
    record["status_reasons"] = flatten_status_reasons(job.status_reasons)
    _put(record, "type", job.type)
    return [record]
