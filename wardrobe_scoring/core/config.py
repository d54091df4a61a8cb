from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    APP_NAME: str = "Wardrobe Scoring Engine"
    APP_ENV: str = "dev"
    # Override the bundled taxonomy (color/silhouette families, weight tables)
    TAXONOMY_PATH: Optional[str] = None
    # Duplicate detection
    DUPLICATE_THRESHOLD: int = 85
    COLOR_DOMINANCE_THR: int = 60
    # Variety analysis
    STYLE_DOMINANCE_THR: int = 70
    # Score bounds
    SCORE_MIN: float = 1.0
    SCORE_MAX: float = 10.0
    SCORE_DEFAULT: float = 5.0
    # Outfit utility penalties
    NO_OUTFITS_PENALTY: float = 3.0
    LIMITED_UTILITY_PENALTY: float = 2.0
    LIMITED_UTILITY_MAX_OUTFITS: int = 2
    LIMITED_UTILITY_MIN_GAPS: int = 2
    # Goals that switch scoring to the constrained table
    CONSTRAINT_GOALS: str = "buy-less-shop-more-intentionally,declutter-downsize,save-money"
    # Scenario extraction
    SCENARIO_NAME_MAX_LEN: int = 50

    @property
    def constraint_goal_list(self) -> List[str]:
        val = self.CONSTRAINT_GOALS
        if not val: return []
        return [v.strip() for v in val.split(",") if v.strip()]

settings = Settings()
