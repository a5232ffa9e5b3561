"""
Tag augmentation for share reads.

User tags and access management tags are fetched concurrently. Tags are
best-effort metadata: a failed or cancelled lookup is logged and degrades
that tag set to empty, it never fails the read.
"""

import asyncio
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Protocol, Set

import structlog

from .tagging_service import TagType

logger = structlog.get_logger(__name__)


class TagLister(Protocol):
    async def list_tags(self, crn: str, tag_type: TagType) -> Set[str]: ...


@dataclass(frozen=True)
class TagSet:
    """Tags attached to one resource CRN."""

    user_tags: FrozenSet[str] = field(default_factory=frozenset)
    access_tags: FrozenSet[str] = field(default_factory=frozenset)
    failed: FrozenSet[TagType] = field(default_factory=frozenset)


async def fetch_tag_set(
    tag_service: TagLister, crn: Optional[str], share_id: Optional[str] = None
) -> TagSet:
    """
    Look up both tag namespaces for ``crn``.

    Args:
        tag_service: Service answering ``list_tags(crn, tag_type)``
        crn: CRN of the share; without one there is nothing to look up
        share_id: Share identifier, used in log messages only

    Returns:
        TagSet: The collected tags, with ``failed`` naming the lookups that
        degraded to empty
    """
    if not crn:
        logger.debug(f"Share {share_id} has no CRN, skipping tag lookups")
        return TagSet()

    tag_types = (TagType.USER, TagType.ACCESS)
    results = await asyncio.gather(
        *(tag_service.list_tags(crn, tag_type) for tag_type in tag_types),
        return_exceptions=True,
    )

    collected = {}
    failed = set()
    for tag_type, result in zip(tag_types, results):
        if isinstance(result, BaseException):
            label = "access tags" if tag_type is TagType.ACCESS else "tags"
            logger.warning(f"Error getting shares ({share_id}) {label}: {result}")
            failed.add(tag_type)
            collected[tag_type] = frozenset()
        else:
            collected[tag_type] = frozenset(result)

    return TagSet(
        user_tags=collected[TagType.USER],
        access_tags=collected[TagType.ACCESS],
        failed=frozenset(failed),
    )
