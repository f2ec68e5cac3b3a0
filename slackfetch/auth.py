from slackfetch.models.fetch import FetchOptions, TransferMode
from slackfetch.settings import Mode

TEST_ACCESS_TOKEN = "test"


def resolve_access_token(mode: Mode, access_token: str) -> str:
    """Return the bearer credential for the outbound fetch.

    Test mode always uses a fixed sentinel so no real credential is needed.
    """
    if mode == Mode.TEST:
        return TEST_ACCESS_TOKEN
    return access_token


def build_fetch_options(url: str, access_token: str) -> FetchOptions:
    return FetchOptions(
        url=url,
        transfer_mode=TransferMode.BINARY,
        authorization_header=f"Bearer {access_token}",
    )
