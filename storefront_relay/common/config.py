import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent.parent
DEFAULT_UPSTREAM_BASE_URL = "https://app-hrsei-api.herokuapp.com/api/fec2/hr-rpp"


@dataclass(frozen=True)
class Settings:
    upstream_base_url: str = DEFAULT_UPSTREAM_BASE_URL
    upstream_token: str = ""
    upstream_timeout_seconds: float = 30.0
    cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    host: str = "0.0.0.0"
    port: int = 3000
    dist_dir: Path = ROOT_DIR / "client" / "dist"
    log_level: str = "INFO"
    log_json: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            upstream_base_url=os.getenv("UPSTREAM_BASE_URL", DEFAULT_UPSTREAM_BASE_URL).rstrip("/"),
            upstream_token=os.getenv("TOKEN", ""),
            upstream_timeout_seconds=float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "30")),
            cloud_name=os.getenv("CLOUD_NAME", ""),
            cloudinary_api_key=os.getenv("CLOUDINARY_API_KEY", ""),
            cloudinary_api_secret=os.getenv("CLOUDINARY_API_SECRET", ""),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            dist_dir=Path(os.getenv("DIST_DIR", str(ROOT_DIR / "client" / "dist"))),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_json=os.getenv("LOG_JSON", "true").lower() == "true",
        )

    @property
    def upstream_headers(self) -> dict[str, str]:
        return {"authorization": self.upstream_token}

    @property
    def upstream_timeout(self) -> float | None:
        # A non-positive value means "wait forever".
        if self.upstream_timeout_seconds <= 0:
            return None
        return self.upstream_timeout_seconds
