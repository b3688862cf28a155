from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the fitplan backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("FITPLAN_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("FITPLAN_DB_PATH") or (self.data_root / "fitplan.db")
        ).expanduser()
        # In production you MUST set FITPLAN_JWT_SECRET. The dev secret keeps local demos easy
        # but is not safe for public deployments.
        self.jwt_secret: str = os.environ.get("FITPLAN_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("FITPLAN_TOKEN_TTL_DAYS") or "7")
        self.cookie_secure: bool = (os.environ.get("FITPLAN_COOKIE_SECURE") or "").strip() in {"1", "true", "True"}
        self.log_level: str = (os.environ.get("FITPLAN_LOG_LEVEL") or "INFO").strip().upper()
        self.seed_on_startup: bool = (os.environ.get("FITPLAN_SEED_ON_STARTUP") or "1").strip() not in {"0", "false", "False"}
        self.shopping_max_days: int = int(os.environ.get("FITPLAN_SHOPPING_MAX_DAYS") or "62")

        # ---- Payment gateway (Stripe REST API) ----
        self.stripe_secret_key: str | None = os.environ.get("STRIPE_SECRET_KEY") or None
        self.stripe_webhook_secret: str | None = os.environ.get("STRIPE_WEBHOOK_SECRET") or None
        self.stripe_api_base: str = os.environ.get("STRIPE_API_BASE", "https://api.stripe.com/v1")
        self.stripe_timeout: float = float(os.environ.get("STRIPE_TIMEOUT", "20"))
        self.stripe_webhook_tolerance_sec: int = int(os.environ.get("STRIPE_WEBHOOK_TOLERANCE_SEC") or "300")
        self.stripe_price_ids: dict[str, str | None] = {
            "workout_only": os.environ.get("STRIPE_PRICE_WORKOUT_ONLY") or None,
            "diet_only": os.environ.get("STRIPE_PRICE_DIET_ONLY") or None,
            "bundle": os.environ.get("STRIPE_PRICE_BUNDLE") or None,
        }
        self.currency: str = (os.environ.get("FITPLAN_CURRENCY") or "gbp").lower()

        cors = os.environ.get("FITPLAN_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
