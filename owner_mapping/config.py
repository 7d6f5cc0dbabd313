import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .vocabulary import DEFAULT_VOCABULARY


def load_environment():
    # Try to load .env from multiple locations
    for env_path in [".env", os.path.expanduser("~/.env")]:
        if os.path.exists(env_path):
            load_dotenv(dotenv_path=env_path)
            break
    else:
        load_dotenv()  # fallback to default behavior


@dataclass(frozen=True)
class Settings:
    input_dir: str = './input/'
    output_dir: str = './owners/'
    log_level: str = 'INFO'
    extra_company_keywords: tuple = ()

    def vocabulary(self):
        return DEFAULT_VOCABULARY.extend(self.extra_company_keywords)


def get_settings():
    """Read settings from the environment (after loading .env)"""
    load_environment()
    extra = os.getenv("OWNER_MAPPING_EXTRA_COMPANY_KEYWORDS", "")
    return Settings(
        input_dir=os.getenv("OWNER_MAPPING_INPUT_DIR", "./input/"),
        output_dir=os.getenv("OWNER_MAPPING_OUTPUT_DIR", "./owners/"),
        log_level=os.getenv("OWNER_MAPPING_LOG_LEVEL", "INFO").upper(),
        extra_company_keywords=tuple(k.strip() for k in extra.split(",") if k.strip()),
    )
