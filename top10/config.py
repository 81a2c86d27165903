from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class DatabaseConfig(BaseSettings):
    # POSTGRES_HOST, POSTGRES_PORT, POSTGRES_DB, POSTGRES_USER, POSTGRES_PASSWORD
    model_config = SettingsConfigDict(env_prefix='POSTGRES_')

    BACKEND: str = Field('memory', validation_alias='TOP10_STORE')
    HOST: str = 'localhost'
    PORT: int = 5432
    DB: str = 'leaderboard'
    USER: str = 'postgres'
    PASSWORD: str = 'postgres'
    TOP_LIMIT: int = Field(10, validation_alias='TOP10_LIMIT')

database = DatabaseConfig()

class ViewerConfig(BaseSettings):
    # TOP10_BASE_URL, TOP10_TIMEOUT, ...
    model_config = SettingsConfigDict(env_prefix='TOP10_')

    base_url: str = 'http://localhost:8000'
    path: str = '/players/find_score_top10'
    content_type: str = 'application/json;charset=UTF-8'
    container_id: str = 'table_top10'
    timeout: float = 5.0

viewer = ViewerConfig()
