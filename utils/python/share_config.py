import os
from dataclasses import dataclass
from typing import Optional

from share_errors import ConfigurationError

DEFAULT_REGION = "eu-north-1"


@dataclass(frozen=True)
class StoreCredentials:
    access_key_id: str
    secret_access_key: str
    session_token: Optional[str] = None

    def as_boto_kwargs(self):
        kwargs = {
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
        }
        if self.session_token:
            kwargs["aws_session_token"] = self.session_token
        return kwargs


@dataclass(frozen=True)
class ShareConfig:
    """Everything a share handler needs to reach the shares table."""

    table_name: str
    region_name: str = DEFAULT_REGION
    endpoint_url: Optional[str] = None
    # None means the default boto3 credential chain (the function's role)
    credentials: Optional[StoreCredentials] = None

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ

        table_name = (env.get("SHARES_TABLE") or "").strip()
        if not table_name:
            raise ConfigurationError("SHARES_TABLE is not set", config_key="SHARES_TABLE")

        access_key_id = env.get("SHARES_ACCESS_KEY_ID")
        secret_access_key = env.get("SHARES_SECRET_ACCESS_KEY")
        if bool(access_key_id) != bool(secret_access_key):
            raise ConfigurationError(
                "SHARES_ACCESS_KEY_ID and SHARES_SECRET_ACCESS_KEY must be set together",
                config_key="SHARES_ACCESS_KEY_ID",
            )
        credentials = None
        if access_key_id:
            credentials = StoreCredentials(access_key_id, secret_access_key)

        return cls(
            table_name=table_name,
            region_name=env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION") or DEFAULT_REGION,
            endpoint_url=env.get("DYNAMODB_ENDPOINT") or None,
            credentials=credentials,
        )
