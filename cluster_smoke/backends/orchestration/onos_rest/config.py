"""Configuration for the ONOS REST orchestration backend."""

from pydantic import BaseModel, SecretStr


class OnosRestConfig(BaseModel):
    """Configuration for the ONOS REST orchestration backend.

    Defaults match a local ONOS controller with its stock credentials.
    """

    api_base_url: str = "http://localhost:8181/onos/v1/"
    username: str = "onos"
    password: SecretStr = SecretStr("rocks")
