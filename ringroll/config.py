from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    environment: str = "local"
    debug: bool = True
    session_secret_key: str = "dev-secret-change-me"

    # random.org integer generator. The template is filled with the batch size
    # and the top of the integer range; draws are normalized by max_value.
    random_org_url: str = (
        "https://www.random.org/integers/"
        "?num={quantity}&min=0&max={max_value}&col=1&base=10&format=plain&rnd=new"
    )
    random_org_max_value: int = 12000
    # None leaves the request open until the transport itself gives up.
    random_org_timeout_seconds: float | None = None

    # Largest ring or skill pool accepted by the HTTP API.
    max_pool_size: int = 5
    # Bonus dice are kept in the session cookie, which browsers cap near 4 KB.
    max_bonus_dice: int = 10


settings = Settings()
