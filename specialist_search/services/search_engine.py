from __future__ import annotations

from typing import List, Optional

import polars as pl

from specialist_search.schemas.specialists import SpecialistOut, SpecialistQuery
from specialist_search.services.specialist_store import SpecialistStore


def filter_specialists(
    df: pl.DataFrame,
    query: SpecialistQuery,
) -> pl.DataFrame:
    """
    Apply the optional search filters to the specialists dataframe.

    Filters (ANDed, each skipped when absent):
    - specialty (exact, case-sensitive equality)
    - text (case-insensitive substring match on name OR city)

    Row order of the input is preserved.
    """
    mask = pl.lit(True)

    if query.specialty is not None:
        mask = mask & (pl.col("specialty") == query.specialty)

    if query.text is not None:
        needle = query.text.lower()
        text_match = pl.col("name").str.to_lowercase().str.contains(
            needle, literal=True
        ) | pl.col("city").str.to_lowercase().str.contains(needle, literal=True)
        mask = mask & text_match.fill_null(False)

    return df.filter(mask)


def search_specialists(
    store: SpecialistStore,
    specialty: Optional[str] = None,
    text: Optional[str] = None,
) -> List[SpecialistOut]:
    query = SpecialistQuery(specialty=specialty, text=text)
    matches = filter_specialists(store.to_frame(), query)
    return [SpecialistOut(**row) for row in matches.to_dicts()]
