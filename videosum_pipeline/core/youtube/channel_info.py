"""
Channel Information Domain Model
Result of handle resolution
"""


class ChannelInfo:
    """
    Domain model representing a resolved YouTube channel.
    Represents a VALID channel state only.
    """

    def __init__(
        self,
        channel_id: str,
        uploads_playlist_id: str,
        title: str = "",
        custom_url: str = ""
    ):
        self.channel_id = channel_id
        self.uploads_playlist_id = uploads_playlist_id
        self.title = title
        self.custom_url = custom_url

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChannelInfo):
            return NotImplemented
        return (
            self.channel_id == other.channel_id
            and self.uploads_playlist_id == other.uploads_playlist_id
        )

    def __hash__(self) -> int:
        return hash((self.channel_id, self.uploads_playlist_id))

    def __repr__(self) -> str:
        return (
            f"ChannelInfo(title={self.title!r}, handle={self.custom_url!r}, "
            f"id={self.channel_id!r}, uploads={self.uploads_playlist_id!r})"
        )
