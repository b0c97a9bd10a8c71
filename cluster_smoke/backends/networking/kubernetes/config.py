"""Configuration for the Kubernetes endpoint source."""

from pathlib import Path

from pydantic import BaseModel, Field, SecretStr


class KubernetesConfig(BaseModel):
    """Configuration for the Kubernetes endpoint source.

    Defaults target the in-cluster API server. Authentication uses a bearer
    token, given directly or read from ``token_file`` (for example the
    mounted service account token).
    """

    api_base_url: str = "https://kubernetes.default.svc/"
    token: SecretStr | None = None
    token_file: Path | None = None
    ca_file: Path | None = None
    verify_ssl: bool = True
    page_size: int = Field(default=500, gt=0)

    def bearer_token(self) -> str | None:
        """Resolve the bearer token, preferring an explicit token."""
        if self.token is not None:
            return self.token.get_secret_value()
        if self.token_file is not None:
            return self.token_file.read_text().strip()
        return None
