import pandas as pd
from pathlib import Path
from typing import Any, Dict, IO, Iterable, List, Optional, Sequence, Union
from core.models import Reservation
from exceptions.custom_errors import FileContentError, FileReadingError
from utils.constants import BLOCKING_STATUSES, MAX_CATEGORY_DEPTH

# Accepted column spellings, matched case-insensitively after trimming
COLUMN_ALIASES = {
    "id": ("id", "reservation id", "event id"),
    "start": ("startdate", "start date", "start", "launch date"),
    "end": ("enddate", "end date", "end"),
    "parent": ("parentcategory", "parent category", "parent"),
    "category": ("category",),
    "entity_id": ("businessid", "business id", "entityid", "entity id"),
    "entity_name": ("business", "merchant", "business name", "entityname"),
    "status": ("status",),
}
SUBCATEGORY_COLUMNS = [f"subcategory{i}" for i in range(1, MAX_CATEGORY_DEPTH)]


def _find_col(col_map: Dict[str, str], aliases: Sequence[str]) -> Optional[str]:
    for alias in aliases:
        if alias in col_map:
            return col_map[alias]
    return None


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    # numeric columns with blanks come back as float64
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    text = str(value).strip()
    return text or None


def _as_day_or_instant(value: Any) -> Any:
    """Date-only spreadsheet cells are civil days; anything with a time of day stays an instant."""
    if isinstance(value, pd.Timestamp) and value.tzinfo is None and value == value.normalize():
        return value.date()
    return value


def _read_table(path_or_buffer: Union[str, Path, IO]) -> pd.DataFrame:
    suffix = Path(str(getattr(path_or_buffer, "name", path_or_buffer))).suffix.lower()
    try:
        if suffix in (".xlsx", ".xls"):
            return pd.read_excel(path_or_buffer)
        return pd.read_csv(path_or_buffer, dtype=str)
    except Exception as e:
        raise FileReadingError(f"Error loading reservations: {e}")


def load_reservations(
    source: Union[str, Path, IO, pd.DataFrame],
    statuses: Optional[Iterable[str]] = BLOCKING_STATUSES,
) -> List[Reservation]:
    """
    Load reservations from a CSV/Excel file or a DataFrame.

    Columns are matched flexibly ('startDate', 'Start Date', 'start', ...).
    Categories come from 'parentCategory' + 'subCategory1..4' when present,
    otherwise from the legacy 'category' column.

    Parameters:
        source: File path, file-like object or an already loaded DataFrame.
        statuses: Statuses to keep (case-insensitive); None keeps every row.

    Returns:
        List[Reservation]: One reservation per kept row.

    Raises:
        FileReadingError: If the file cannot be read.
        FileContentError: If required columns are missing or a row has no id/dates.
    """
    df = source.copy() if isinstance(source, pd.DataFrame) else _read_table(source)
    col_map = {str(col).lower().strip(): col for col in df.columns}

    id_col = _find_col(col_map, COLUMN_ALIASES["id"])
    start_col = _find_col(col_map, COLUMN_ALIASES["start"])
    end_col = _find_col(col_map, COLUMN_ALIASES["end"])
    missing = [
        name
        for name, col in (("id", id_col), ("start date", start_col), ("end date", end_col))
        if col is None
    ]
    if missing:
        raise FileContentError(f"Missing expected column(s): {', '.join(missing)}")

    parent_col = _find_col(col_map, COLUMN_ALIASES["parent"])
    category_col = _find_col(col_map, COLUMN_ALIASES["category"])
    sub_cols = [col_map[c] for c in SUBCATEGORY_COLUMNS if c in col_map]
    entity_id_col = _find_col(col_map, COLUMN_ALIASES["entity_id"])
    entity_name_col = _find_col(col_map, COLUMN_ALIASES["entity_name"])
    status_col = _find_col(col_map, COLUMN_ALIASES["status"])

    keep = {s.lower() for s in statuses} if statuses is not None else None

    reservations = []
    for idx, row in df.iterrows():
        status = (_clean(row[status_col]) if status_col else None) or "booked"
        if keep is not None and status.lower() not in keep:
            continue

        res_id = _clean(row[id_col])
        start = _as_day_or_instant(row[start_col])
        end = _as_day_or_instant(row[end_col])
        if res_id is None or _clean(start) is None or _clean(end) is None:
            raise FileContentError(f"Row {idx} is missing an id, start date or end date.")

        path = []
        if parent_col:
            path = [_clean(row[parent_col])] + [_clean(row[c]) for c in sub_cols]
            path = [p for p in path if p]

        reservations.append(
            Reservation(
                id=res_id,
                start_date=start,
                end_date=end,
                category_path=tuple(path),
                legacy_category=_clean(row[category_col]) if category_col else None,
                entity_id=_clean(row[entity_id_col]) if entity_id_col else None,
                entity_name=_clean(row[entity_name_col]) if entity_name_col else None,
                status=status,
            )
        )
    return reservations


def reservations_from_records(
    records: Iterable[Dict[str, Any]],
    statuses: Optional[Iterable[str]] = BLOCKING_STATUSES,
) -> List[Reservation]:
    """Same as load_reservations, for rows already held as dictionaries."""
    records = list(records)
    if not records:
        return []
    return load_reservations(pd.DataFrame.from_records(records), statuses)
