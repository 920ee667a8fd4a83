import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Loan(BaseModel):
    """Loan data holder. Not linked to any employee."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = Field(None, description="Loan identifier")
    loan_type: Optional[str] = Field(None, description="Kind of loan")
    date: Optional[datetime.date] = Field(None, description="Loan date")

    def __str__(self) -> str:
        date = self.date.isoformat() if self.date is not None else None
        return f"Loan [id={self.id}, loanType={self.loan_type}, date={date}]"
