from __future__ import annotations

from ..database.unit_of_work import UnitOfWorkFactory
from .model import ReferenceOptions


class ReferenceDataService:
    """Use case: read-only lists for selection inputs (companies, positions, ...)."""

    def __init__(self, uow_factory: UnitOfWorkFactory):
        self._uow = uow_factory

    def options(self) -> ReferenceOptions:
        with self._uow() as uow:
            return ReferenceOptions(
                companies=list(uow.reference.list_companies()),
                positions=list(uow.reference.list_positions()),
                offices=list(uow.reference.list_offices()),
                cities=list(uow.reference.list_cities()),
                departments=list(uow.reference.list_departments()),
            )
