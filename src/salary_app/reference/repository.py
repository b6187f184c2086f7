from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AddressType
from .model import Address, City, Company, Department, Office, Position


class ReferenceRepository(Protocol):
    """Lookups over the reference tables (companies, offices, positions, ...)."""

    def get_company(self, company_id: int) -> Optional[Company]:
        raise NotImplementedError

    def get_position(self, position_id: int) -> Optional[Position]:
        raise NotImplementedError

    def get_office(self, office_id: int) -> Optional[Office]:
        raise NotImplementedError

    def get_city(self, city_id: int) -> Optional[City]:
        raise NotImplementedError

    def list_companies(self) -> Sequence[Company]:
        raise NotImplementedError

    def list_positions(self) -> Sequence[Position]:
        raise NotImplementedError

    def list_offices(self) -> Sequence[Office]:
        raise NotImplementedError

    def list_cities(self) -> Sequence[City]:
        raise NotImplementedError

    def list_departments(self) -> Sequence[Department]:
        raise NotImplementedError


class AddressRepository(Protocol):
    def get_by_id(self, address_id: int) -> Optional[Address]:
        raise NotImplementedError

    def create(
        self,
        *,
        street_name: str,
        street_number: str,
        neighborhood: Optional[str],
        postal_code: Optional[str],
        city_id: int,
        address_type: AddressType,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        address_id: int,
        street_name: str,
        street_number: str,
        neighborhood: Optional[str],
        postal_code: Optional[str],
        city_id: int,
        address_type: AddressType,
    ) -> bool:
        raise NotImplementedError
