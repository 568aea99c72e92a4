from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

NODE_ENV_DEFAULT = "development"
DATABASE_URL_DEFAULT = "no definida"

ARTIFACT_NAME = "output.txt"
ARTIFACT_ENCODING = "utf-8"


@dataclass(frozen=True)
class Settings:
    """Snapshot of the environment, taken once at startup."""
    node_env: str
    database_url: str

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        # empty values fall back to the defaults too
        return cls(
            node_env=env.get("NODE_ENV") or NODE_ENV_DEFAULT,
            database_url=env.get("DATABASE_URL") or DATABASE_URL_DEFAULT,
        )

    def as_dict(self) -> dict[str, str]:
        return {"NODE_ENV": self.node_env, "DATABASE_URL": self.database_url}
