"""FitNest Server Configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    server_name: str = "FitNest Server"
    version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    log_level: str = "INFO"

    # Database: SQLite file at db_path unless database_url is set
    # ("sqlite://" gives a throwaway in-memory store, used by the tests).
    db_path: Path = Path.home() / "fitnest" / "data" / "fitnest.db"
    database_url: str = ""

    # Query defaults
    recent_activity_limit: int = 5
    stats_window_days: int = 7
    health_tip_limit: int = 5

    # Startup
    seed_health_tips: bool = True

    model_config = {"env_prefix": "FITNEST_"}

    def resolved_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{self.db_path}"


settings = Settings()
