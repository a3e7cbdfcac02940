"""
Storefront Settings

Environment is read once by load_settings(); the resulting values are passed
to CartStore and CatalogClient at construction.
"""
import os
from dataclasses import dataclass, field
from decimal import Decimal

from storefront.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SESSION_SECRET = "fallback-secret-change-in-production"
DEFAULT_CATALOG_URL = "https://dummyjson.com"
DEFAULT_SHIPPING = Decimal("20.00")


@dataclass(frozen=True)
class SessionConfig:
    """Session cookie attributes and signing secrets."""
    secrets: tuple[str, ...] = (DEFAULT_SESSION_SECRET,)
    cookie_name: str = "__session"
    path: str = "/"
    http_only: bool = True
    same_site: str = "lax"
    secure: bool = False
    max_age: int | None = None  # None = browser-session cookie, signature never expires
    salt: str = "storefront-session"

    def __post_init__(self):
        if not self.secrets:
            raise ValueError("SessionConfig requires at least one secret")


@dataclass(frozen=True)
class CatalogConfig:
    """Where the external product catalog lives."""
    base_url: str = DEFAULT_CATALOG_URL
    timeout: float = 10.0


@dataclass(frozen=True)
class Settings:
    session: SessionConfig = field(default_factory=SessionConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    shipping: Decimal = DEFAULT_SHIPPING
    environment: str = "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def _split_csv(raw: str) -> tuple[str, ...]:
    return tuple(s.strip() for s in raw.split(",") if s.strip())


def load_settings() -> Settings:
    """Build Settings from environment variables."""
    environment = os.environ.get("ENVIRONMENT", "development").lower()

    secrets = _split_csv(os.environ.get("SESSION_SECRET", ""))
    if not secrets:
        # Known default keeps local runs working; anyone can forge cookies with it
        logger.warning("SESSION_SECRET is not set, signing session cookies with the default secret")
        secrets = (DEFAULT_SESSION_SECRET,)

    max_age_raw = os.environ.get("SESSION_MAX_AGE", "")
    max_age = int(max_age_raw) if max_age_raw else None

    session = SessionConfig(
        secrets=secrets,
        secure=environment == "production",
        max_age=max_age,
    )
    catalog = CatalogConfig(
        base_url=os.environ.get("CATALOG_BASE_URL", DEFAULT_CATALOG_URL).rstrip("/"),
        timeout=float(os.environ.get("CATALOG_TIMEOUT", "10")),
    )
    shipping = Decimal(os.environ.get("SHIPPING_FLAT_RATE", str(DEFAULT_SHIPPING)))

    return Settings(session=session, catalog=catalog, shipping=shipping, environment=environment)


def load_cors_origins() -> list[str]:
    """Browser origins allowed to call the API with the session cookie. Empty means same-origin only."""
    return [origin.rstrip("/") for origin in _split_csv(os.environ.get("CORS_ORIGINS", ""))]
