import os

def get_settings_module() -> str:
    # Pick the settings module from APP_ENV, default is 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"
    
    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"
    
    # 3. Everything else falls back to development
    return "config.development"


def parse_subjects(value: str) -> tuple:
    """Split a comma-separated subject list, e.g. "DS,LINUX,AJVA"."""
    return tuple(s.strip() for s in value.split(",") if s.strip())
