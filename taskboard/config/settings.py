# taskboard/config/settings.py
# Application settings loaded from the environment

import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from dotenv import load_dotenv


@dataclass(frozen=True)
class AdminSeed:
    email: str
    password: str
    name: str
    username: str


@dataclass
class Settings:
    """Explicit configuration object passed into the app and its services"""

    database_url: str = "sqlite:///./taskboard.db"
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    client_url: str = "http://localhost:5173"
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False
    api_url: str = "http://localhost:5000"
    log_level: str = "INFO"
    bcrypt_rounds: int = 12
    admin_seeds: List[AdminSeed] = field(default_factory=list)
    # Configured admin addresses, including ones without a seed password
    extra_admin_emails: Tuple[str, ...] = ()

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Build settings from environment variables (and a .env file if present)"""
        load_dotenv(env_file)

        seeds = []
        allow_list = []
        for email, password, name, username in (
            (os.getenv("FIRST_ADMIN_EMAIL"), os.getenv("FIRST_ADMIN_PASSWORD"), "First Admin", "firstadmin"),
            (os.getenv("SECOND_ADMIN_EMAIL"), os.getenv("SECOND_ADMIN_PASSWORD"), "Second Admin", "secondadmin"),
        ):
            if email:
                allow_list.append(email)
            # A pair with a missing half is not seeded
            if email and password:
                seeds.append(AdminSeed(email=email, password=password, name=name, username=username))

        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            jwt_secret=os.getenv("JWT_SECRET", cls.jwt_secret),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", cls.jwt_algorithm),
            client_url=os.getenv("CLIENT_URL", cls.client_url),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            reload=os.getenv("RELOAD", "false").lower() == "true",
            api_url=os.getenv("API_URL", cls.api_url),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", str(cls.bcrypt_rounds))),
            admin_seeds=seeds,
            extra_admin_emails=tuple(allow_list),
        )

    @property
    def admin_emails(self) -> Tuple[str, ...]:
        """Allow-list of addresses that get the admin role at signup"""
        emails = list(self.extra_admin_emails)
        for seed in self.admin_seeds:
            if seed.email not in emails:
                emails.append(seed.email)
        return tuple(emails)
