import json

from tests.helpers import FakeYouTubeClient, channel_body, playlist_page, ts, videos_body
from videosum_pipeline.core.config.app_config import AppConfig
from videosum_pipeline.core.pipeline import run_pipeline
from videosum_pipeline.core.run_result import Failure, Success
from videosum_pipeline.core.youtube.errors import NetworkError


def make_config(**overrides) -> AppConfig:
    values = {"api_key": "test-key", "channel": "somechannel"}
    values.update(overrides)
    return AppConfig(**values)


def test_full_run_against_the_real_client(http_client_factory):
    client = http_client_factory(
        (200, channel_body("UC123", "UU123")),
        (200, playlist_page(["a", "b"], "token1", [ts(0), ts(10)])),
        (200, playlist_page(["c"], None, [ts(20)])),
        (200, videos_body({"a": "PT30S", "b": "PT45S", "c": "PT2H"})),
    )

    result = run_pipeline(make_config(page_size=2), client)

    assert isinstance(result, Success)
    assert [r.video_id for r in result.records] == ["a", "b", "c"]
    assert result.total_seconds == 7275


def test_date_window_is_applied(http_client_factory):
    client = http_client_factory(
        (200, channel_body()),
        (200, playlist_page(["a", "b", "c"], None, [ts(0), ts(10), ts(20)])),
        (200, videos_body({"b": "PT1M"})),
    )

    result = run_pipeline(make_config(start_date=ts(5), end_date=ts(15)), client)

    assert [r.video_id for r in result.records] == ["b"]
    assert result.total_seconds == 60


def test_unknown_channel_becomes_a_failure_with_the_lookup_body(http_client_factory):
    body = {"kind": "youtube#channelListResponse", "pageInfo": {"totalResults": 0, "resultsPerPage": 5}}
    client = http_client_factory((200, body))

    result = run_pipeline(make_config(channel="nobody"), client)

    assert isinstance(result, Failure)
    assert json.loads(result.last_raw_response) == body
    assert "nobody" in result.reason


def test_failing_playlist_page_becomes_a_failure_with_that_page(http_client_factory):
    error_body = '{"error": {"code": 404, "message": "playlistNotFound"}}'
    client = http_client_factory(
        (200, channel_body()),
        (200, playlist_page(["a"], "token1")),
        (404, error_body),
    )

    result = run_pipeline(make_config(), client)

    assert isinstance(result, Failure)
    assert result.last_raw_response == error_body


def test_network_failure_has_no_raw_body():
    client = FakeYouTubeClient({"channels": [NetworkError("Unable to find the server")]})

    result = run_pipeline(make_config(), client)

    assert isinstance(result, Failure)
    assert result.last_raw_response is None
    assert "Unable to find the server" in result.reason


def test_stages_run_in_order(fake_client):
    fake_client.queue("channels", channel_body())
    fake_client.queue("playlistItems", playlist_page(["a"]))
    fake_client.queue("videos", videos_body({"a": "PT1S"}))

    run_pipeline(make_config(), fake_client)

    assert [endpoint for endpoint, _ in fake_client.calls] == ["channels", "playlistItems", "videos"]


def test_null_channel_content_details_becomes_a_failure():
    body = channel_body("UC1")
    body["items"][0]["contentDetails"] = None
    client = FakeYouTubeClient({"channels": [body]})

    result = run_pipeline(make_config(), client)

    assert isinstance(result, Failure)
    assert json.loads(result.last_raw_response) == body
