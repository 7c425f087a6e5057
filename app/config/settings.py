from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Required for admin operations (auth admin API, bypassing RLS)
    session_cookie_name: str = "sb-access-token"

    # Supabase Storage buckets
    products_bucket: str = "products"
    partners_bucket: str = "partners"
    facilities_bucket: str = "facilities"
    notices_bucket: str = "notices"

    # Locales
    locales: str = "ko,en"
    default_locale: str = "ko"
    locale_detection: bool = True  # Negotiate from Accept-Language when the URL has no locale
    locale_cookie_name: str = "site_locale"

    # File-backed history document served at /api/history
    history_file_path: str = "data/history.json"

    # HTML sanitizer strategy: nh3 | bleach
    sanitizer_backend: str = "nh3"

    # Mail (SMTP)
    mail_host: Optional[str] = None
    mail_port: int = 587
    mail_user: Optional[str] = None
    mail_pass: Optional[str] = None
    mail_from: Optional[str] = None
    mail_admin_from: Optional[str] = None
    mail_to: Optional[str] = None
    mail_use_tls: bool = True
    mail_timeout: int = 30

    # App
    app_name: str = "corpsite-cms"
    app_url: str = "http://localhost:3000"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"
    inquiry_rate_limit: str = "5/minute"
    password_reset_rate_limit: str = "3/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_mail_enabled(self) -> bool:
        return bool(self.mail_host and (self.mail_from or self.mail_admin_from))

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def get_locales_list(self) -> List[str]:
        return [l.strip() for l in self.locales.split(",") if l.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
