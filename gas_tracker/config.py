"""Application configuration and environment settings"""
from typing import Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class AlchemyEndpoints(BaseModel):
    """Resolved Alchemy endpoint URLs for one API key"""
    history_url: str = Field(..., description="Transaction history by address endpoint")
    prices_url: str = Field(..., description="Historical token prices endpoint")

class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    # Alchemy settings
    ALCHEMY_API_KEY: Optional[str] = Field(None, description="Alchemy API key")
    ALCHEMY_DATA_URL: str = Field("https://api.g.alchemy.com/data/v1", description="Alchemy Data API base URL")
    ALCHEMY_PRICES_URL: str = Field("https://api.g.alchemy.com/prices/v1", description="Alchemy Prices API base URL")
    REQUEST_TIMEOUT: float = Field(30.0, gt=0, description="HTTP request timeout in seconds")

    # Chain settings
    NETWORK: str = Field("eth-mainnet", description="Network the history is scoped to")
    PRICE_SYMBOL: str = Field("ETH", description="Symbol of the native token for price lookups")
    UNIT_EXPONENT: int = Field(18, ge=0, description="Power of ten between the smallest unit and the display unit")

    # Pagination settings
    HISTORY_PAGE_SIZE: int = Field(50, ge=1, le=50, description="Transactions requested per history page")
    MAX_HISTORY_PAGES: int = Field(1000, ge=1, description="Upper bound on history pages fetched in one run")

    # Processing settings
    PROGRESS_INTERVAL: int = Field(10, ge=1, description="Emit progress every N processed transactions")
    PACING_INTERVAL: int = Field(20, ge=1, description="Pause every N processed transactions")
    PACING_DELAY: float = Field(0.1, ge=0, description="Pause length in seconds to stay under rate limits")

    # CLI settings
    WALLET_ADDRESS: Optional[str] = Field(None, description="Default address for the command-line entry point")
    OUTPUT_DIR: str = Field("./output", description="Directory for output files")

    @property
    def alchemy_endpoints(self) -> AlchemyEndpoints:
        """Get the endpoint URLs with the API key embedded"""
        return AlchemyEndpoints(
            history_url=f"{self.ALCHEMY_DATA_URL}/{self.ALCHEMY_API_KEY}/transactions/history/by-address",
            prices_url=f"{self.ALCHEMY_PRICES_URL}/{self.ALCHEMY_API_KEY}/tokens/historical"
        )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True
    )

settings = Settings()
