from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Simulation
    max_payoff_months: int = 600  # 50 years; runs hitting this are non-converged

    # App
    api_title: str = "Debt Payoff Planner"
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
