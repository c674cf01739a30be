"""Month and city filters for the shows page."""

from typing import Dict, Iterable, List, Mapping, TypeVar

from .models import ALL, FilterSelection, Show

K = TypeVar("K")


def apply_filters(shows: Iterable[Show], month: str = ALL, city: str = ALL) -> List[Show]:
    """Keep shows matching both selections. "all" matches everything.

    A show with no parsable date/time has no month, so it only survives
    when month is "all".
    """
    return [
        show for show in shows
        if (month == ALL or show.month_key == month)
        and (city == ALL or show.city == city)
    ]


class FilterEngine:
    """Holds the current month/city selection and nothing else."""

    def __init__(self, selection: FilterSelection = FilterSelection()):
        self.selection = selection

    def select_month(self, month: str) -> None:
        self.selection = FilterSelection(month=month or ALL, city=self.selection.city)

    def select_city(self, city: str) -> None:
        self.selection = FilterSelection(month=self.selection.month, city=city or ALL)

    def reset(self) -> None:
        self.selection = FilterSelection()

    def apply(self, shows: Iterable[Show]) -> List[Show]:
        return apply_filters(shows, self.selection.month, self.selection.city)

    def apply_all(self, partitions: Mapping[K, Iterable[Show]]) -> Dict[K, List[Show]]:
        return {key: self.apply(shows) for key, shows in partitions.items()}
