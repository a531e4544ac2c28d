import pytest

from tests.helpers import FakeYouTubeClient, mock_http
from videosum_pipeline.core.youtube.youtube_client import YouTubeClient


@pytest.fixture
def fake_client():
    return FakeYouTubeClient()


@pytest.fixture
def http_client_factory():
    def factory(*responses):
        return YouTubeClient("test-key", http=mock_http(*responses))
    return factory
