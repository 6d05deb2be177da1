"""FastAPI dependency injection."""

from dealroom.config import settings


def get_default_occupancy() -> str:
    return settings.deal_form_default_occupancy
