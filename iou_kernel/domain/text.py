"""Display text helpers."""

DEFAULT_OMISSION = "..."


def truncate(text: str | None, length: int, omission: str = DEFAULT_OMISSION) -> str:
    """Shorten ``text`` so that the result, omission included, fits ``length``.

    Text that already fits is returned unchanged; ``None`` becomes ``""``.
    When ``length`` is too small to hold any text before the omission, the
    omission alone is returned.
    """
    if not text:
        return ""
    if len(text) <= length:
        return text

    end = length - len(omission)
    if end < 1:
        return omission[: max(length, 0)]
    return text[:end] + omission
