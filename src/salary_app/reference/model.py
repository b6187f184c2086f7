from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import AddressType


@dataclass(frozen=True)
class City:
    city_id: int
    name: str


@dataclass(frozen=True)
class Company:
    company_id: int
    name: str


@dataclass(frozen=True)
class Address:
    """Postal address; owned 1:1 by an employee or used by an office."""

    address_id: int
    street_name: str
    street_number: str
    city_id: int
    address_type: AddressType
    neighborhood: Optional[str] = None
    postal_code: Optional[str] = None


@dataclass(frozen=True)
class Office:
    office_id: int
    name: str
    company_id: int
    address_id: int


@dataclass(frozen=True)
class Department:
    department_id: int
    name: str
    company_id: int


@dataclass(frozen=True)
class Position:
    """Job position; ``base_salary`` is the template pay for every salary record."""

    position_id: int
    title: str
    base_salary: Decimal
    department_id: int


@dataclass(frozen=True)
class ReferenceOptions:
    """Read-only lists used to populate selection inputs."""

    companies: Sequence[Company] = field(default_factory=list)
    positions: Sequence[Position] = field(default_factory=list)
    offices: Sequence[Office] = field(default_factory=list)
    cities: Sequence[City] = field(default_factory=list)
    departments: Sequence[Department] = field(default_factory=list)
