"""
Pydantic schema for the global line number settings.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class LineNumberSettings(BaseModel):
    """Schema for the "Enable Line number in Console log" form and file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    enable_linenumber: bool = Field(
        ...,
        alias="enableLinenumber",
        description="Prefix every console line with its line number"
    )

    def to_document(self) -> Dict[str, Any]:
        """Shape written to the settings file."""
        return self.model_dump(by_alias=True)


def validate_settings_form(form_data: Dict[str, Any]) -> LineNumberSettings:
    """
    Validate submitted form data.

    Args:
        form_data: Raw key/value pairs from the configuration form

    Returns:
        Validated settings

    Raises:
        ValueError: If validation fails, naming the offending field
    """
    if not isinstance(form_data, dict):
        raise ValueError(f"Settings form must be a mapping, got {type(form_data).__name__}")

    try:
        return LineNumberSettings.model_validate(form_data)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            errors.append(f"{field}: {error['msg']}")
        raise ValueError(f"Invalid settings: {'; '.join(errors)}")
