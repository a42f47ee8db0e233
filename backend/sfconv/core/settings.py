import os


DEFAULT_CORS_ORIGINS = ','.join([
    "http://localhost:5173",
    "https://localhost:5173",
    "http://localhost:3000",
    "https://localhost:3000",
])


class Settings:
    LOG_LEVEL: str = os.getenv('SFCONV_LOG_LEVEL', 'INFO').upper()
    ON_ELEMENT_ERROR: str = os.getenv('SFCONV_ON_ELEMENT_ERROR', 'absent').lower()
    CORS_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv('SFCONV_CORS_ORIGINS', DEFAULT_CORS_ORIGINS).split(',')
        if origin.strip()
    ]
