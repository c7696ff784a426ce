from __future__ import annotations

from typing import Any, List, Sequence

from .config import FILE_NAME_HEADER
from .errors import ValidationError
from .models import FieldSpec


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def validate_field_specs(field_specs: Sequence[FieldSpec]) -> List[FieldSpec]:
    """Check that every field has a path and a unique alias."""
    if not field_specs:
        raise ValidationError("Add at least one field with a path and an alias.")

    seen = {FILE_NAME_HEADER}
    for idx, spec in enumerate(field_specs, start=1):
        if _is_blank(spec.path) or _is_blank(spec.alias):
            raise ValidationError(f"Field {idx}: specify both a JSON path and an alias.")
        if spec.alias in seen:
            raise ValidationError(f"Field {idx}: alias '{spec.alias}' is already used by another column.")
        seen.add(spec.alias)
    return list(field_specs)


def validate_request(files: Sequence[Any], field_specs: Sequence[FieldSpec]) -> List[FieldSpec]:
    """Boundary check run before extraction starts."""
    if not files:
        raise ValidationError("Please upload JSON files and specify paths and aliases for all fields.")
    return validate_field_specs(field_specs)
