from collections.abc import Sequence

from staychill.schemas.location import Language, LocationRecord


def _matches(record: LocationRecord, query: str) -> bool:
    # Both languages are searched whatever the active one is.
    fields = (record.nameEn, record.nameAr, record.regionEn, record.regionAr)
    return any(query in field.lower() for field in fields)


def filter_locations(
    records: Sequence[LocationRecord],
    query: str | None,
    language: Language = Language.en,
) -> list[LocationRecord]:
    """Case-insensitive substring search over localized names and regions.

    ``language`` only affects how results are rendered, not which records
    match. An empty query returns every record in its original order.
    """
    needle = (query or "").lower()
    if not needle:
        return list(records)
    return [r for r in records if _matches(r, needle)]
