from __future__ import annotations

from specialist_search.schemas.specialists import SpecialistFilterOptions
from specialist_search.services.specialist_store import SpecialistStore


def get_filter_options(store: SpecialistStore) -> SpecialistFilterOptions:
    """Distinct specialties and cities present in the store, sorted."""
    df = store.to_frame()

    specialties = df.get_column("specialty").unique().sort().to_list()
    cities = df.get_column("city").unique().sort().to_list()

    return SpecialistFilterOptions(specialties=specialties, cities=cities)
