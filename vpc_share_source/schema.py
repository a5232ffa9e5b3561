"""Attribute schema of the source share data source.

``SOURCE_SHARE_SCHEMA`` declares every attribute a read can populate, and
``AttributeSet`` is the container a read writes into. Assignments are
checked against the declared type so that a shape mismatch surfaces at the
field that caused it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Set

from .exceptions import SchemaTypeError

USER_TAGS = "tags"
ACCESS_TAGS = "access_tags"


class ValueType(Enum):
    STRING = "string"
    INT = "int"
    LIST = "list"
    SET = "set"


@dataclass(frozen=True)
class Attribute:
    """Definition of one attribute.

    ``elem`` is the nested record schema of a LIST attribute.
    """

    type: ValueType
    description: str = ""
    required: bool = False
    computed: bool = False
    elem: Optional[Mapping[str, "Attribute"]] = None


def _computed(value_type: ValueType, description: str, **kwargs: Any) -> Attribute:
    return Attribute(value_type, description, computed=True, **kwargs)


_DELETED = {
    "more_info": _computed(
        ValueType.STRING, "Link to documentation about deleted resources."
    ),
}

_STATUS_REASON = {
    "code": _computed(
        ValueType.STRING, "A snake case string succinctly identifying the status reason."
    ),
    "message": _computed(ValueType.STRING, "An explanation of the status reason."),
    "more_info": _computed(
        ValueType.STRING, "Link to documentation about this status reason."
    ),
}

_SHARE_REFERENCE = {
    "crn": _computed(ValueType.STRING, "The CRN for this file share."),
    "deleted": _computed(
        ValueType.LIST,
        "If present, this property indicates the referenced resource has been "
        "deleted and provides some supplementary information.",
        elem=_DELETED,
    ),
    "href": _computed(ValueType.STRING, "The URL for this file share."),
    "id": _computed(ValueType.STRING, "The unique identifier for this file share."),
    "name": _computed(
        ValueType.STRING, "The unique user-defined name for this file share."
    ),
    "resource_type": _computed(ValueType.STRING, "The resource type."),
}

_SHARE_TARGET = {
    "deleted": _SHARE_REFERENCE["deleted"],
    "href": _computed(ValueType.STRING, "The URL for this share target."),
    "id": _computed(ValueType.STRING, "The unique identifier for this share target."),
    "name": _computed(ValueType.STRING, "The user-defined name for this share target."),
    "resource_type": _computed(ValueType.STRING, "The type of resource referenced."),
}

_LATEST_JOB = {
    "status": _computed(
        ValueType.STRING,
        "The status of the file share job: cancelled, failed, queued, running "
        "or succeeded. Values may expand in the future.",
    ),
    "status_reasons": _computed(
        ValueType.LIST,
        "The reasons for the file share job status (if any).",
        elem=_STATUS_REASON,
    ),
    "type": _computed(
        ValueType.STRING,
        "The type of the file share job: replication_failover, replication_init "
        "or replication_split. Values may expand in the future.",
    ),
}

SOURCE_SHARE_SCHEMA: Dict[str, Attribute] = {
    "share_replica": Attribute(
        ValueType.STRING, "The replica file share identifier.", required=True
    ),
    "created_at": _computed(
        ValueType.STRING, "The date and time that the file share is created."
    ),
    "crn": _computed(ValueType.STRING, "The CRN for this share."),
    "encryption": _computed(
        ValueType.STRING, "The type of encryption used for this file share."
    ),
    "encryption_key": _computed(
        ValueType.STRING, "The CRN of the root key used to encrypt this file share."
    ),
    "href": _computed(ValueType.STRING, "The URL for this share."),
    "iops": _computed(
        ValueType.INT,
        "The maximum input/output operation performance bandwidth per second "
        "for the file share.",
    ),
    "latest_job": _computed(
        ValueType.LIST,
        "The latest job associated with this file share. Absent if no jobs "
        "have been created for this file share.",
        elem=_LATEST_JOB,
    ),
    "lifecycle_state": _computed(
        ValueType.STRING, "The lifecycle state of the file share."
    ),
    "name": _computed(ValueType.STRING, "Name of the share."),
    "profile": _computed(
        ValueType.STRING,
        "The globally unique name of the profile this file share uses.",
    ),
    "replica_share": _computed(
        ValueType.LIST,
        "The replica file share for this source file share. Present when the "
        "replication_role is source.",
        elem=_SHARE_REFERENCE,
    ),
    "replication_cron_spec": _computed(
        ValueType.STRING,
        "The cron specification for the file share replication schedule.",
    ),
    "replication_role": _computed(
        ValueType.STRING, "The replication role of the file share: none, replica or source."
    ),
    "replication_status": _computed(
        ValueType.STRING,
        "The replication status of the file share: active, failover_pending, "
        "initializing, none or split_pending.",
    ),
    "replication_status_reasons": _computed(
        ValueType.LIST,
        "The reasons for the current replication status (if any).",
        elem=_STATUS_REASON,
    ),
    "resource_group": _computed(
        ValueType.STRING,
        "The unique identifier of the resource group for this file share.",
    ),
    "resource_type": _computed(ValueType.STRING, "The type of resource referenced."),
    "size": _computed(
        ValueType.INT, "The size of the file share rounded up to the next gigabyte."
    ),
    "source_share": _computed(
        ValueType.LIST,
        "The source file share for this replica file share. Present when the "
        "replication_role is replica.",
        elem=_SHARE_REFERENCE,
    ),
    "share_targets": _computed(
        ValueType.LIST, "Mount targets for the file share.", elem=_SHARE_TARGET
    ),
    "zone": _computed(
        ValueType.STRING,
        "The globally unique name of the zone this file share resides in.",
    ),
    ACCESS_TAGS: _computed(ValueType.SET, "List of access management tags"),
    USER_TAGS: _computed(ValueType.SET, "List of tags"),
}


def _validate(path: str, attribute: Attribute, value: Any) -> Any:
    """Check ``value`` against ``attribute`` and return the value to store."""
    if attribute.type is ValueType.STRING:
        if not isinstance(value, str):
            raise SchemaTypeError(
                f"{path}: expected string, got {type(value).__name__}", attribute=path
            )
        return value

    if attribute.type is ValueType.INT:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SchemaTypeError(
                f"{path}: expected int, got {type(value).__name__}", attribute=path
            )
        return value

    if attribute.type is ValueType.SET:
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise SchemaTypeError(
                f"{path}: expected a set of strings, got {type(value).__name__}",
                attribute=path,
            )
        items = set(value)
        if not all(isinstance(item, str) for item in items):
            raise SchemaTypeError(
                f"{path}: set elements must be strings", attribute=path
            )
        return items

    if not isinstance(value, list):
        raise SchemaTypeError(
            f"{path}: expected list, got {type(value).__name__}", attribute=path
        )
    if attribute.elem is None:
        return list(value)
    records = []
    for index, record in enumerate(value):
        record_path = f"{path}.{index}"
        if not isinstance(record, Mapping):
            raise SchemaTypeError(
                f"{record_path}: expected a mapping, got {type(record).__name__}",
                attribute=path,
            )
        checked: Dict[str, Any] = {}
        for key, item in record.items():
            nested = attribute.elem.get(key)
            if nested is None:
                raise SchemaTypeError(
                    f"{record_path}: unknown attribute {key!r}", attribute=path
                )
            if item is not None:
                checked[key] = _validate(f"{record_path}.{key}", nested, item)
        records.append(checked)
    return records


class AttributeSet:
    """Identity key plus attribute values of one data source read."""

    def __init__(self, schema: Optional[Mapping[str, Attribute]] = None) -> None:
        self._schema = schema if schema is not None else SOURCE_SHARE_SCHEMA
        self._id = ""
        self._values: Dict[str, Any] = {}

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: Optional[str]) -> None:
        """Set the identity key; an empty value signals the entity is gone."""
        self._id = value or ""

    def set(self, name: str, value: Any) -> None:
        """Assign ``name``. ``None`` leaves the attribute absent.

        Raises:
            SchemaTypeError: If ``name`` is undeclared or ``value`` has the
                wrong shape
        """
        attribute = self._schema.get(name)
        if attribute is None:
            raise SchemaTypeError(f"unknown attribute {name!r}", attribute=name)
        if value is None:
            self._values.pop(name, None)
            return
        self._values[name] = _validate(name, attribute, value)

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def has(self, name: str) -> bool:
        return name in self._values

    def keys(self) -> Set[str]:
        return set(self._values)

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot for serialization; sets are rendered as sorted lists."""
        result: Dict[str, Any] = {"id": self._id}
        for name in sorted(self._values):
            value = self._values[name]
            result[name] = sorted(value) if isinstance(value, set) else value
        return result

    def __repr__(self) -> str:
        return f"AttributeSet(id={self._id!r}, attributes={sorted(self._values)})"
