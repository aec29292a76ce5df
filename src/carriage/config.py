from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

_cached_clerk_secret: str | None = None


def _resolve_clerk_secret() -> str:
    """Fetch Clerk secret from Secrets Manager at runtime, with caching."""
    global _cached_clerk_secret
    if _cached_clerk_secret is not None:
        return _cached_clerk_secret

    # Local dev: use env var directly
    direct = environ.get("CLERK_SECRET_KEY", "")
    if direct:
        _cached_clerk_secret = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("CLERK_SECRET_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager")
    _cached_clerk_secret = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_clerk_secret


def _split_csv(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    admins_table: str
    drivers_table: str
    riders_table: str
    vehicles_table: str
    locations_table: str
    rides_table: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    token_ttl_seconds: int
    clerk_secret_key: str = ""
    default_locality: str
    timezone: str
    cors_origins: tuple[str, ...] = ()
    log_level: str = "INFO"
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config; for testing only."""
    global _cached_config, _cached_clerk_secret
    _cached_config = None
    _cached_clerk_secret = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        admins_table=environ.get("ADMINS_TABLE", "Admins"),
        drivers_table=environ.get("DRIVERS_TABLE", "Drivers"),
        riders_table=environ.get("RIDERS_TABLE", "Riders"),
        vehicles_table=environ.get("VEHICLES_TABLE", "Vehicles"),
        locations_table=environ.get("LOCATIONS_TABLE", "Locations"),
        rides_table=environ.get("RIDES_TABLE", "Rides"),
        jwt_secret=environ.get("JWT_SECRET", "dev-change-this-secret"),
        jwt_algorithm=environ.get("JWT_ALG", "HS256"),
        token_ttl_seconds=int(environ.get("TOKEN_TTL_SECONDS", str(7 * 24 * 60 * 60))),
        clerk_secret_key=_resolve_clerk_secret(),
        default_locality=environ.get("DEFAULT_LOCALITY", "Ithaca, NY 14850"),
        timezone=environ.get("TIMEZONE", "America/New_York"),
        cors_origins=_split_csv(environ.get("CORS_ORIGINS", "http://localhost:3000")),
        log_level=environ.get("LOG_LEVEL", "INFO"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
