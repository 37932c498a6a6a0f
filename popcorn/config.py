"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe POPCORN_,
et peut optionnellement être fournie via un fichier .env.

La clé API OMDb est optionnelle - la recherche et les détails sont désactivés si non fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de popcorn/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe POPCORN_.
    Exemple : POPCORN_OMDB_API_KEY=abcd1234

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="POPCORN_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Catalogue OMDb (clé OPTIONNELLE - recherche désactivée si non définie)
    omdb_api_key: Optional[str] = Field(default=None)
    omdb_base_url: str = Field(default="https://www.omdbapi.com/")
    http_timeout_seconds: float = Field(default=30.0, gt=0)

    # Recherche
    min_query_length: int = Field(default=3, ge=1)
    search_debounce_seconds: float = Field(default=0.3, ge=0)

    # Stockage de la liste des films vus
    store_dir: Path = Field(default=Path("~/.popcorn/store"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file_level: str = Field(default="DEBUG")
    log_file: Path = Field(default=Path("logs/popcorn.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("store_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def omdb_enabled(self) -> bool:
        """Vérifie si l'API OMDb est configurée."""
        return bool(self.omdb_api_key)
