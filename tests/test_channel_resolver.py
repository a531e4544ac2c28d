import pytest

from tests.helpers import FakeYouTubeClient, channel_body
from videosum_pipeline.core.youtube.channel_resolver import ChannelResolver, normalize_handle
from videosum_pipeline.core.youtube.errors import (
    ChannelNotFoundError,
    HttpStatusError,
    MalformedResponseError,
)


@pytest.mark.parametrize("handle", ["somechannel", "@somechannel", "  @somechannel "])
def test_normalize_handle_strips_prefix_and_whitespace(handle):
    assert normalize_handle(handle) == "somechannel"


def test_resolve_looks_up_the_prefixed_handle_once(fake_client):
    fake_client.queue("channels", channel_body("UC123", "UU123"))

    channel = ChannelResolver(fake_client).resolve("@somechannel")

    assert channel.channel_id == "UC123"
    assert channel.uploads_playlist_id == "UU123"
    assert channel.title == "Some Channel"
    assert len(fake_client.calls) == 1
    assert fake_client.calls_to("channels")[0]["forHandle"] == "@somechannel"


def test_resolving_twice_yields_the_same_pair():
    client = FakeYouTubeClient({"channels": [channel_body("UC9", "UU9"), channel_body("UC9", "UU9")]})
    resolver = ChannelResolver(client)

    first = resolver.resolve("somechannel")
    second = resolver.resolve("@somechannel")

    assert first == second
    assert (first.channel_id, first.uploads_playlist_id) == ("UC9", "UU9")


def test_no_matching_channel_raises_not_found(fake_client):
    fake_client.queue("channels", {"kind": "youtube#channelListResponse", "pageInfo": {"totalResults": 0}})

    with pytest.raises(ChannelNotFoundError) as exc_info:
        ChannelResolver(fake_client).resolve("nobody")

    assert exc_info.value.handle == "nobody"
    assert '"totalResults": 0' in exc_info.value.raw


def test_missing_uploads_playlist_is_malformed(fake_client):
    fake_client.queue("channels", channel_body("UC123", uploads=None))

    with pytest.raises(MalformedResponseError) as exc_info:
        ChannelResolver(fake_client).resolve("somechannel")

    assert "UC123" in exc_info.value.raw


def test_api_errors_propagate_unchanged(fake_client):
    error = HttpStatusError(400, '{"error": {"message": "API key not valid"}}')
    fake_client.queue("channels", error)

    with pytest.raises(HttpStatusError) as exc_info:
        ChannelResolver(fake_client).resolve("somechannel")

    assert exc_info.value is error


def test_only_the_leading_at_is_stripped():
    assert normalize_handle("@some@") == "some@"


def test_null_content_details_is_malformed(fake_client):
    body = channel_body("UC1")
    body["items"][0]["contentDetails"] = None
    fake_client.queue("channels", body)

    with pytest.raises(MalformedResponseError) as exc_info:
        ChannelResolver(fake_client).resolve("somechannel")

    assert '"contentDetails": null' in exc_info.value.raw


def test_null_snippet_still_resolves(fake_client):
    body = channel_body("UC1", "UU1")
    body["items"][0]["snippet"] = None
    fake_client.queue("channels", body)

    channel = ChannelResolver(fake_client).resolve("somechannel")

    assert (channel.channel_id, channel.uploads_playlist_id) == ("UC1", "UU1")
    assert channel.title == ""
