"""
Configuration via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe THETVDB_,
et peut optionnellement etre fournie via un fichier .env.

La cle API est optionnelle ici : la CLI refuse de s'executer si elle est absente.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fichier .env a la racine du projet (parent de thetvdb/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres du client avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe THETVDB_.
    Exemple : THETVDB_LANGUAGE=fr
    """

    model_config = SettingsConfigDict(
        env_prefix="THETVDB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    api_key: Optional[str] = Field(default=None)
    base_url: str = Field(default="https://api.thetvdb.com")
    language: str = Field(default="en", min_length=2)
    request_timeout: float = Field(default=30.0, gt=0)
    token_refresh_margin_seconds: int = Field(default=60, ge=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/thetvdb.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home."""
        return Path(v).expanduser()

    @property
    def api_enabled(self) -> bool:
        """Verifie si la cle API est configuree."""
        return bool(self.api_key)
