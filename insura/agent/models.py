from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Union

from insura.validation.field_validator import is_valid_gender

AGE_FIELD = dict(gt=0, lt=120, strict=True)


class ToolArgs(BaseModel):
    # numeric fields are strict: "35" for an age is rejected instead of silently coerced
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ValidateFieldArgs(ToolArgs):
    field_type: Literal["mobile", "email", "age", "gender", "amount"] = Field(
        ..., alias="fieldType", description="Type of field to validate"
    )
    value: Union[str, int, float] = Field(..., description="Value to validate")


class ParseAmountArgs(ToolArgs):
    amount_text: str = Field(
        ..., alias="amountText",
        description='Amount text to parse (e.g., "12 lakhs", "1.2M", "500000")',
    )


class ApplicantArgs(ToolArgs):
    name: str = Field(..., min_length=1, description="Full name")
    mobile: str = Field(..., description="Mobile number")
    email: str = Field(..., description="Email address")
    city: str = Field(..., min_length=1, description="City of residence")
    amount_insured: float = Field(
        ..., alias="amountInsured", gt=0, allow_inf_nan=False, strict=True,
        description="Amount to be insured (per person)",
    )


class IndividualPremiumArgs(ApplicantArgs):
    age: int = Field(..., description="Age", **AGE_FIELD)
    gender: str = Field(..., description="Gender (Male/Female)")

    @field_validator("gender")
    @classmethod
    def _known_gender(cls, v: str) -> str:
        if not is_valid_gender(v):
            raise ValueError("Gender must be Male or Female")
        return v


class ChildArgs(ToolArgs):
    age: int = Field(..., description="Age", **AGE_FIELD)


class FamilyPremiumArgs(ApplicantArgs):
    name: str = Field(..., min_length=1, description="Primary contact name")
    husband_age: int = Field(..., alias="husbandAge", description="Husband age", **AGE_FIELD)
    wife_age: int = Field(..., alias="wifeAge", description="Wife age", **AGE_FIELD)
    sons: List[ChildArgs] = Field(default_factory=list, description="Sons with ages, in the order given")
    daughters: List[ChildArgs] = Field(default_factory=list, description="Daughters with ages, in the order given")


class NumberToWordsArgs(ToolArgs):
    number: float = Field(..., allow_inf_nan=False, strict=True, description="Number to convert to words")
