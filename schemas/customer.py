from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CustomerCreate(BaseModel):
    """KYC attributes of a borrower; customers are never updated once created."""
    name: str = Field(..., min_length=1)
    father_husband_name: str
    dob: str
    gender: str
    pan_number: str
    phone: str
    address: str
    pin_code: str
    marital_status: str
    annual_income: int = Field(..., ge=0)
    profession: str
    bank_name: str
    religion: str
    ifsc_code: str
    qualification: str
    account_number: str

    model_config = {"populate_by_name": True, "alias_generator": to_camel}
