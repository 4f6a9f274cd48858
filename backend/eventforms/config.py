"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Institutional email domains
    INSTITUTE_PRIMARY_DOMAIN: str = "@iiit.ac.in"
    INSTITUTE_STUDENT_DOMAIN: str = "@students.iiit.ac.in"
    # Staff domains count when classifying a participant, but do not
    # exempt a registrant from naming their college.
    INSTITUTE_EXTRA_DOMAINS: list[str] = ["@faculty.iiit.ac.in", "@research.iiit.ac.in"]

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def institutional_domains(self) -> tuple[str, ...]:
        """Suffixes checked by the institutional-email rule."""
        return (self.INSTITUTE_PRIMARY_DOMAIN, self.INSTITUTE_STUDENT_DOMAIN)

    @property
    def participant_domains(self) -> tuple[str, ...]:
        """Suffixes that classify a participant as IIIT."""
        return self.institutional_domains + tuple(self.INSTITUTE_EXTRA_DOMAINS)


@lru_cache
def get_settings() -> Settings:
    return Settings()
