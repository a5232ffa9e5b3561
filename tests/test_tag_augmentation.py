"""Tests for best-effort tag augmentation."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from vpc_share_source.exceptions import TagLookupError
from vpc_share_source.services.tag_augmentation import TagSet, fetch_tag_set
from vpc_share_source.services.tagging_service import TagType


def tag_service(user=None, access=None):
    """Build a tag service whose answers are values or exceptions per type."""
    answers = {TagType.USER: user or set(), TagType.ACCESS: access or set()}

    async def list_tags(crn, tag_type):
        answer = answers[tag_type]
        if isinstance(answer, BaseException):
            raise answer
        return answer

    service = AsyncMock()
    service.list_tags.side_effect = list_tags
    return service


@pytest.mark.asyncio
async def test_both_namespaces_collected(share_crn):
    service = tag_service(user={"env:test"}, access={"project:alpha"})

    tags = await fetch_tag_set(service, share_crn, share_id="s1")

    assert tags == TagSet(
        user_tags=frozenset({"env:test"}), access_tags=frozenset({"project:alpha"})
    )
    called = {call.args[1] for call in service.list_tags.call_args_list}
    assert called == {TagType.USER, TagType.ACCESS}


@pytest.mark.asyncio
async def test_access_failure_degrades_only_access(share_crn):
    service = tag_service(
        user={"env:test"},
        access=TagLookupError("permission denied", tag_type="access"),
    )

    tags = await fetch_tag_set(service, share_crn, share_id="s1")

    assert tags.user_tags == frozenset({"env:test"})
    assert tags.access_tags == frozenset()
    assert tags.failed == frozenset({TagType.ACCESS})


@pytest.mark.asyncio
async def test_both_failures_degrade_to_empty(share_crn):
    service = tag_service(user=RuntimeError("boom"), access=RuntimeError("boom"))

    tags = await fetch_tag_set(service, share_crn)

    assert tags.user_tags == frozenset()
    assert tags.access_tags == frozenset()
    assert tags.failed == {TagType.USER, TagType.ACCESS}


@pytest.mark.asyncio
async def test_cancelled_lookup_degrades_to_empty(share_crn):
    service = tag_service(user={"env:test"}, access=asyncio.CancelledError())

    tags = await fetch_tag_set(service, share_crn)

    assert tags.user_tags == frozenset({"env:test"})
    assert tags.access_tags == frozenset()


@pytest.mark.asyncio
async def test_no_crn_skips_lookups():
    service = tag_service()

    tags = await fetch_tag_set(service, None, share_id="s1")

    assert tags == TagSet()
    service.list_tags.assert_not_called()


@pytest.mark.asyncio
async def test_failure_is_logged(share_crn):
    service = tag_service(access=TagLookupError("permission denied"))

    with patch("vpc_share_source.services.tag_augmentation.logger") as mock_logger:
        await fetch_tag_set(service, share_crn, share_id="s1")

    message = mock_logger.warning.call_args.args[0]
    assert "s1" in message and "access tags" in message
