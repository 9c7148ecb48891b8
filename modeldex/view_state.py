"""List/detail navigation state.

The view is always exactly one of ListView or DetailView; a detail view
cannot exist without the record it shows.
"""

from dataclasses import dataclass
from modeldex.models import ModelRecord


@dataclass(frozen=True)
class ListView:
    """The filtered result list is shown."""


@dataclass(frozen=True)
class DetailView:
    """A single record is shown in full."""

    model: ModelRecord


ViewState = ListView | DetailView
