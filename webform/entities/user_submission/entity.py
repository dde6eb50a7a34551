"""Entity: UserSubmission."""

from typing import Any, Literal, get_args

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

Sex = Literal["Male", "Female"]
SEX_CHOICES: tuple[str, ...] = get_args(Sex)

# Form input name -> entity attribute
FORM_FIELDS = {
    "firstname": "first_name",
    "lastname": "last_name",
    "email": "email",
    "phone": "phone",
    "sex": "sex",
}


def _form_field(form_name: str, description: str) -> Any:
    column = FORM_FIELDS[form_name]
    choices = (form_name, column) if form_name != column else (form_name,)
    return Field(validation_alias=AliasChoices(*choices), description=description)


class UserSubmission(BaseModel):
    """One submission of the signup form.

    Accepts either the HTML form names (``firstname``) or the column names
    (``first_name``). Values are kept exactly as submitted; the only checks
    are presence, non-blank text and membership of ``sex`` in SEX_CHOICES.
    Email and phone formats are deliberately not checked.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    first_name: str = _form_field("firstname", "First name")
    last_name: str = _form_field("lastname", "Last name")
    email: str = _form_field("email", "Email address")
    phone: str = _form_field("phone", "Phone number")
    sex: Sex = _form_field("sex", "Sex")

    @field_validator("first_name", "last_name", "email", "phone")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def column_values(self) -> dict[str, str]:
        """Values keyed by table column, in column order."""
        return {column: getattr(self, column) for column in FORM_FIELDS.values()}
