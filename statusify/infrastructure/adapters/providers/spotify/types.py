from enum import StrEnum


class SpotifyScope(StrEnum):
    """Spotify OAuth scopes for user-related operations.

    See: https://developer.spotify.com/documentation/web-api/concepts/scopes
    """

    # Listening History
    USER_READ_PLAYBACK_STATE = "user-read-playback-state"
    USER_READ_CURRENTLY_PLAYING = "user-read-currently-playing"
    USER_READ_RECENTLY_PLAYED = "user-read-recently-played"

    # Users
    USER_READ_EMAIL = "user-read-email"
    USER_READ_PRIVATE = "user-read-private"

    @classmethod
    def required_scopes(cls) -> str:
        # What is needed to mirror the playing track into the Slack status.
        scopes = [
            cls.USER_READ_CURRENTLY_PLAYING,
            cls.USER_READ_PLAYBACK_STATE,
        ]
        return " ".join(scope.value for scope in scopes)
