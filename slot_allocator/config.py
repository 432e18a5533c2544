import os


def _csv(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


class Settings:
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))
    CORS_ORIGINS: list[str] = _csv(os.getenv("CORS_ORIGINS", "*"))

    # Applied by the HTTP layer when a request carries no override ("" = none)
    DEFAULT_ALGORITHM: str = os.getenv("DEFAULT_ALGORITHM", "").strip().lower()

    # Scored-heuristic weights
    SCORE_BASE: float = float(os.getenv("SCORE_BASE", "50"))
    SCORE_TYPE_MATCH: float = float(os.getenv("SCORE_TYPE_MATCH", "30"))
    SCORE_GROUND_FLOOR: float = float(os.getenv("SCORE_GROUND_FLOOR", "20"))
    SCORE_ZONE_A: float = float(os.getenv("SCORE_ZONE_A", "15"))
    SCORE_ZONE_B: float = float(os.getenv("SCORE_ZONE_B", "10"))
    SCORE_ZONE_C: float = float(os.getenv("SCORE_ZONE_C", "5"))
    SCORE_POSITION_MAX: float = float(os.getenv("SCORE_POSITION_MAX", "20"))
    GROUND_FLOORS: list[str] = [f.lower() for f in _csv(os.getenv("GROUND_FLOORS", "ground,g,0"))]


settings = Settings()
