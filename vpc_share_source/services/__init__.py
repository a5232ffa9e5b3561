"""Remote collaborators and the read orchestrator."""

from .share_client import ShareSourceClient
from .source_share_reader import SourceShareReader, project_share
from .tag_augmentation import TagSet, fetch_tag_set
from .tagging_service import GlobalTagService, TagType

__all__ = [
    "GlobalTagService",
    "ShareSourceClient",
    "SourceShareReader",
    "TagSet",
    "TagType",
    "fetch_tag_set",
    "project_share",
]
