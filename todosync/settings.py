import os
from dataclasses import dataclass

HOST = "127.0.0.1"
PORT = 5000
TIMEOUT = 5.0


@dataclass(frozen=True)
class RemoteSourceSettings:
    host: str = HOST
    port: int = PORT
    timeout: float = TIMEOUT  # seconds per http request

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @classmethod
    def from_env(cls) -> "RemoteSourceSettings":
        return cls(
            host=os.environ.get("TODO_SYNC_HOST", HOST),
            port=int(os.environ.get("TODO_SYNC_PORT", PORT)),
            timeout=float(os.environ.get("TODO_SYNC_TIMEOUT", TIMEOUT)),
        )
