"""Pydantic schemas for clinic dashboard form payloads.

The store accepts any well-shaped payload; these schemas are what the dialogs
run before handing a payload to the store.  ``validate_form`` returns the
cleaned field dict ready for ``ClinicDataStore.add_*``.
"""

from __future__ import annotations

from typing import Dict, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from services.exceptions import FormValidationError


class _Form(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    @field_validator("name", check_fields=False)
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value:
            raise ValueError("Field is required")
        return value


class HospitalForm(_Form):
    name: str
    address: str = ""
    phone: str = ""
    status: Literal["active", "inactive"] = "active"


class DoctorForm(_Form):
    name: str
    email: str = ""
    phone: str = ""
    specialization: str = ""
    hospital_id: str = ""
    status: Literal["active", "on-leave", "inactive"] = "active"


class PatientForm(_Form):
    name: str
    email: str = ""
    phone: str = ""
    age: int = Field(default=0, ge=0, le=150)
    gender: Literal["male", "female", "other"] = "other"
    doctor_id: str = ""
    hospital_id: str = ""
    status: Literal["active", "inactive"] = "active"


class AppointmentForm(_Form):
    patient_id: str = ""
    patient_name: str
    patient_phone: str = ""
    doctor_id: str = ""
    time: str
    date: str = ""
    type: str = ""
    status: Literal["scheduled", "in-progress", "completed", "cancelled"] = "scheduled"
    notes: Optional[str] = None

    @field_validator("patient_name", "time")
    @classmethod
    def required(cls, value: str) -> str:
        if not value:
            raise ValueError("Field is required")
        return value


class StaffForm(_Form):
    name: str
    email: str = ""
    phone: str = ""
    role: str = ""
    doctor_id: str = ""
    status: Literal["active", "on-leave", "inactive"] = "active"


FORMS: Dict[str, Type[_Form]] = {
    "hospital": HospitalForm,
    "doctor": DoctorForm,
    "patient": PatientForm,
    "appointment": AppointmentForm,
    "staff": StaffForm,
}


def validate_form(kind: str, payload: Dict[str, object]) -> Dict[str, object]:
    """Validate a dialog payload; raise :class:`FormValidationError` listing every problem."""

    try:
        form = FORMS[kind]
    except KeyError:
        raise FormValidationError(kind, [f"no form defined for {kind!r}"]) from None
    try:
        model = form.model_validate(payload)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(p) for p in err['loc']) or kind}: {err['msg']}"
            for err in exc.errors()
        ]
        raise FormValidationError(kind, errors) from exc
    return model.model_dump()


__all__ = [
    "HospitalForm",
    "DoctorForm",
    "PatientForm",
    "AppointmentForm",
    "StaffForm",
    "FORMS",
    "validate_form",
]
