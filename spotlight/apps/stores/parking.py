from enum import Enum


class ParkingStatus(Enum):
    UNAVAILABLE = ("불가", "destructive")
    PAID = ("유료", "warning")
    FREE = ("무료", "default")
    UNKNOWN = ("정보없음", "outline")

    def __init__(self, label, variant):
        self.label = label
        self.variant = variant


# first match wins
_KEYWORDS = (
    ("불가", ParkingStatus.UNAVAILABLE),
    ("유료", ParkingStatus.PAID),
    ("무료", ParkingStatus.FREE),
)


def classify_parking(value):
    """Derive a parking status from the free-text field.

    Older records stored a boolean; ``True`` reads as free parking.
    """
    if isinstance(value, bool):
        return ParkingStatus.FREE if value else ParkingStatus.UNAVAILABLE
    text = (value or "").lower()
    for keyword, status in _KEYWORDS:
        if keyword in text:
            return status
    return ParkingStatus.UNKNOWN
