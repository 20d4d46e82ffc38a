import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from scythe.errors import ConfigError


@dataclass(frozen=True)
class AppConfig:
    """Configuration for the application"""

    spreadsheet_id: str
    employee: str
    category: str
    harvest_subdomain: str
    harvest_username: str
    harvest_username_id: str
    harvest_password: str
    google_credentials: str
    sheet_name: str | None = None


def load_config(config_file: str | None = None) -> AppConfig:
    """Load configuration from environment variables, optionally seeded from a dotenv file"""
    if config_file is not None:
        if not os.path.isfile(config_file):
            raise ConfigError(f"Configuration file not found: {config_file}")
        load_dotenv(config_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    required_vars = {
        "SPREADSHEET_ID": os.getenv("SPREADSHEET_ID"),
        "EMPLOYEE": os.getenv("EMPLOYEE"),
        "CATEGORY": os.getenv("CATEGORY"),
        "HARVEST_SUBDOMAIN": os.getenv("HARVEST_SUBDOMAIN"),
        "HARVEST_USERNAME": os.getenv("HARVEST_USERNAME"),
        "HARVEST_USERNAME_ID": os.getenv("HARVEST_USERNAME_ID"),
        "HARVEST_PASSWORD": os.getenv("HARVEST_PASSWORD"),
        "GOOGLE_CREDENTIALS": os.getenv("GOOGLE_CREDENTIALS"),
    }

    missing = [k for k, v in required_vars.items() if not v]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    return AppConfig(
        spreadsheet_id=required_vars["SPREADSHEET_ID"],
        employee=required_vars["EMPLOYEE"],
        category=required_vars["CATEGORY"],
        harvest_subdomain=required_vars["HARVEST_SUBDOMAIN"],
        harvest_username=required_vars["HARVEST_USERNAME"],
        harvest_username_id=required_vars["HARVEST_USERNAME_ID"],
        harvest_password=required_vars["HARVEST_PASSWORD"],
        google_credentials=required_vars["GOOGLE_CREDENTIALS"],
        sheet_name=os.getenv("SHEET_NAME") or None,
    )
