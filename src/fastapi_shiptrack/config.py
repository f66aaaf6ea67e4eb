"""Shipping service configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ShiptrackConfig(BaseSettings):
    """Runtime config for the shipping service."""

    model_config = SettingsConfigDict(env_prefix="SHIPTRACK_")

    identity_header: str = "x-caller-identity"
    shipment_id_prefix: str = "SH"
    return_id_prefix: str = "RT"
    id_width: int = Field(default=6, ge=1)
