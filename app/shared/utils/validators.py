# 📄 File: app/shared/utils/validators.py

# 🧭 Purpose (Layman Explanation):
# Checks incoming data before the app acts on it, for example making sure a profile
# edit only touches the fields people are allowed to change.

# 🧪 Purpose (Technical Summary):
# Reusable input validators raising the application ValidationError (HTTP 400).

# 🔗 Dependencies:
# - app.shared.core.exceptions: ValidationError

# 🔄 Connected Modules / Calls From:
# Used by: profile edit, group edit and event edit endpoints

from typing import Any, Dict, Iterable

from app.shared.core.exceptions import ValidationError


def validate_allowed_updates(updates: Dict[str, Any], allowed: Iterable[str]) -> Dict[str, Any]:
    """
    Reject an update payload that names any field outside ``allowed``.

    Raises:
        ValidationError: "Invalid updates!" listing the rejected keys
    """
    allowed = set(allowed)
    rejected = sorted(key for key in updates if key not in allowed)
    if rejected:
        raise ValidationError("Invalid updates!", details={"rejected": rejected})
    if not updates:
        raise ValidationError("No updates provided")
    return updates


def validate_password_length(password: str, min_length: int) -> str:
    if len(password) < min_length:
        raise ValidationError(
            f"Password must be at least {min_length} characters long",
            field="password",
        )
    return password


def validate_coordinates(lat: float, lng: float) -> None:
    if not -90.0 <= lat <= 90.0:
        raise ValidationError("Latitude must be between -90 and 90", field="lat")
    if not -180.0 <= lng <= 180.0:
        raise ValidationError("Longitude must be between -180 and 180", field="lng")
