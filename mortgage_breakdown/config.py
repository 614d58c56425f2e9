from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Display
    app_title: str = "Mortgage Breakdown"
    currency_symbol: str = "£"

    # Input limits
    max_months: int = 1200  # 100 years
    max_principal: Decimal = Decimal("1000000000000")
    max_rate: Decimal = Decimal("100")  # Percent per year

    # Downloads
    pdf_rows_per_page: int = 40
    pdf_filename: str = "mortgage_breakdown.pdf"
    csv_filename: str = "mortgage_breakdown.csv"

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
