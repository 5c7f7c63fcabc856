"""Connection defaults for the Extended REST API."""

from pydantic import BaseModel, ConfigDict, field_validator

MAINNET_API_URL = "https://app.extended.exchange"
TESTNET_API_URL = "https://testnet.extended.exchange"

# Every REST path is resolved below this prefix
API_PREFIX = "api/v1"

DEFAULT_TIMEOUT_MS = 10_000


class ServerConfig(BaseModel):
    """API host per environment. Either host can be overridden independently."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mainnet: str = MAINNET_API_URL
    testnet: str = TESTNET_API_URL

    @field_validator("mainnet", "testnet", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> object:
        # httpx.URL and similar objects are accepted as well as plain strings
        return value if isinstance(value, str) else str(value)

    def api_url(self, is_testnet: bool) -> str:
        """Return the host for the selected environment, without trailing slash."""
        host = self.testnet if is_testnet else self.mainnet
        return host.rstrip("/")
