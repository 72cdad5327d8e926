"""Configuration management using Pydantic Settings"""

from typing import Dict, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from decision_gateway.domain.models import DecisionRules


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-decision-gateway"
    log_level: str = "INFO"
    cors_allow_origins: List[str] = ["*"]

    # Loan bounds (amount in euros, period in months)
    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 60

    # Applicant age limits, MAX_AGE_BY_COUNTRY is read as JSON
    min_age: int = 18
    max_age_by_country: Dict[str, int] = Field(
        default_factory=lambda: {"estonia": 78, "latvia": 75, "lithuania": 76}
    )

    # Credit modifiers per personal code segment
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000
    min_credit_score: float = 0.1

    def decision_rules(self) -> DecisionRules:
        """Resolve the business constants into an immutable rule set"""
        return DecisionRules(
            min_loan_amount=self.min_loan_amount,
            max_loan_amount=self.max_loan_amount,
            min_loan_period=self.min_loan_period,
            max_loan_period=self.max_loan_period,
            min_age=self.min_age,
            max_age_by_country=self.max_age_by_country,
            segment_1_credit_modifier=self.segment_1_credit_modifier,
            segment_2_credit_modifier=self.segment_2_credit_modifier,
            segment_3_credit_modifier=self.segment_3_credit_modifier,
            min_credit_score=self.min_credit_score,
        )


settings = Settings()
