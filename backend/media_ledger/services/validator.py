"""Field bound checks for media records.

The validate_* predicates are total: any input, including a wrong type,
yields a bool. check_media_fields turns them into ordered assertions.
"""
from media_ledger.errors import InvalidNameError, InvalidSizeError, MalformedLabelError

NAME_MAX_LEN = 64  # exclusive
SUMMARY_MAX_LEN = 128  # exclusive
LABEL_MAX_LEN = 32  # inclusive
LABELS_MAX_COUNT = 10
BYTE_COUNT_LIMIT = 1_000_000_000  # exclusive


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_label(text) -> bool:
    return isinstance(text, str) and 1 <= len(text) <= LABEL_MAX_LEN


def validate_label_set(labels) -> bool:
    """True iff there are 1-10 labels and each one validates. An empty list is invalid."""
    if not isinstance(labels, (list, tuple)):
        return False
    if not 1 <= len(labels) <= LABELS_MAX_COUNT:
        return False
    return all(validate_label(label) for label in labels)


def validate_name(text) -> bool:
    return isinstance(text, str) and 1 <= len(text) < NAME_MAX_LEN


def validate_summary(text) -> bool:
    return isinstance(text, str) and 1 <= len(text) < SUMMARY_MAX_LEN


def validate_byte_count(n) -> bool:
    return _is_int(n) and 0 < n < BYTE_COUNT_LIMIT


def check_media_fields(name, byte_count, summary, labels) -> None:
    """Raise the error for the first violated bound, checked in a fixed order.

    The error set has no summary kind, so summary violations report invalid-name.
    """
    if not validate_name(name):
        raise InvalidNameError(f"Name length must be between 1 and {NAME_MAX_LEN - 1}")
    if not validate_byte_count(byte_count):
        raise InvalidSizeError(f"Byte count must be between 1 and {BYTE_COUNT_LIMIT - 1}")
    if not validate_summary(summary):
        raise InvalidNameError(f"Summary length must be between 1 and {SUMMARY_MAX_LEN - 1}")
    if not validate_label_set(labels):
        raise MalformedLabelError(
            f"Expected 1 to {LABELS_MAX_COUNT} labels of 1 to {LABEL_MAX_LEN} characters"
        )
