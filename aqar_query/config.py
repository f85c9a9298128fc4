from pydantic_settings import BaseSettings


class AppConfig(BaseSettings):
    debug: bool = False
    log_level: str = "INFO"

    max_query_length: int = 500

    class Config:
        env_file = ".env"

    @property
    def is_debug_logging(self) -> bool:
        return self.debug or self.log_level.upper() == "DEBUG"


app_config = AppConfig()
