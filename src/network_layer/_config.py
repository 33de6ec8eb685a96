import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from ._utils.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    DOTENV_FILE,
    ENV_RAISE_FOR_STATUS,
    ENV_REQUEST_TIMEOUT,
    ENV_TRUST_ENV,
)


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    raise_for_status: bool = False
    trust_env: bool = True

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "ClientConfig":
        """Build a config from ``NETWORK_LAYER_*`` environment variables.

        Variables from the ``.env`` file (in the working directory unless
        ``dotenv_path`` is given) are loaded first without overriding the
        ones already set. Unset variables keep their defaults.
        """
        load_dotenv(
            dotenv_path=dotenv_path or os.path.join(os.getcwd(), DOTENV_FILE),
            override=False,
        )

        values: dict[str, Any] = {}
        for field_name, env_var in (
            ("request_timeout", ENV_REQUEST_TIMEOUT),
            ("raise_for_status", ENV_RAISE_FOR_STATUS),
            ("trust_env", ENV_TRUST_ENV),
        ):
            value = os.getenv(env_var)
            if value is not None and value != "":
                values[field_name] = value

        return cls.model_validate(values)
