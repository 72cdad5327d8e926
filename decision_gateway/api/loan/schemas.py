"""Pydantic schemas for API request/response validation"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class DecisionRequest(BaseModel):
    """Request body for POST /loan/decision"""

    model_config = ConfigDict(populate_by_name=True)

    personal_code: str = Field(..., alias="personalCode", description="Personal ID code of the applicant")
    loan_amount: StrictInt = Field(..., alias="loanAmount", description="Requested loan amount in euros")
    loan_period: StrictInt = Field(..., alias="loanPeriod", description="Requested loan period in months")
    country: str = Field(..., description="Country of residence")
    age: StrictInt = Field(..., description="Applicant age in years")


class DecisionResponse(BaseModel):
    """Response for POST /loan/decision; either the offer or the error message is set"""

    model_config = ConfigDict(populate_by_name=True)

    loan_amount: Optional[int] = Field(None, alias="loanAmount")
    loan_period: Optional[int] = Field(None, alias="loanPeriod")
    error_message: Optional[str] = Field(None, alias="errorMessage")
