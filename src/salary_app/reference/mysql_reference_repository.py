from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import AddressType
from ..database.mysql_base import fetchall, fetchone
from .model import Address, City, Company, Department, Office, Position
from .repository import AddressRepository, ReferenceRepository


def _position(r: dict) -> Position:
    return Position(
        position_id=int(r["position_id"]),
        title=r["title"],
        base_salary=Decimal(r["base_salary"]),
        department_id=int(r["department_id"]),
    )


def _office(r: dict) -> Office:
    return Office(
        office_id=int(r["office_id"]),
        name=r["name"],
        company_id=int(r["company_id"]),
        address_id=int(r["address_id"]),
    )


class MySQLReferenceRepository(ReferenceRepository):
    def __init__(self, cur):
        self._cur = cur

    def get_company(self, company_id: int) -> Optional[Company]:
        self._cur.execute("SELECT company_id, name FROM companies WHERE company_id=%s", (int(company_id),))
        r = fetchone(self._cur)
        return Company(company_id=int(r["company_id"]), name=r["name"]) if r else None

    def get_position(self, position_id: int) -> Optional[Position]:
        self._cur.execute(
            "SELECT position_id, title, base_salary, department_id FROM positions WHERE position_id=%s",
            (int(position_id),),
        )
        r = fetchone(self._cur)
        return _position(r) if r else None

    def get_office(self, office_id: int) -> Optional[Office]:
        self._cur.execute(
            "SELECT office_id, name, company_id, address_id FROM offices WHERE office_id=%s",
            (int(office_id),),
        )
        r = fetchone(self._cur)
        return _office(r) if r else None

    def get_city(self, city_id: int) -> Optional[City]:
        self._cur.execute("SELECT city_id, name FROM cities WHERE city_id=%s", (int(city_id),))
        r = fetchone(self._cur)
        return City(city_id=int(r["city_id"]), name=r["name"]) if r else None

    def list_companies(self) -> Sequence[Company]:
        self._cur.execute("SELECT company_id, name FROM companies ORDER BY name")
        return [Company(company_id=int(r["company_id"]), name=r["name"]) for r in fetchall(self._cur)]

    def list_positions(self) -> Sequence[Position]:
        self._cur.execute("SELECT position_id, title, base_salary, department_id FROM positions ORDER BY title")
        return [_position(r) for r in fetchall(self._cur)]

    def list_offices(self) -> Sequence[Office]:
        self._cur.execute("SELECT office_id, name, company_id, address_id FROM offices ORDER BY name")
        return [_office(r) for r in fetchall(self._cur)]

    def list_cities(self) -> Sequence[City]:
        self._cur.execute("SELECT city_id, name FROM cities ORDER BY name")
        return [City(city_id=int(r["city_id"]), name=r["name"]) for r in fetchall(self._cur)]

    def list_departments(self) -> Sequence[Department]:
        self._cur.execute("SELECT department_id, name, company_id FROM departments ORDER BY name")
        return [
            Department(department_id=int(r["department_id"]), name=r["name"], company_id=int(r["company_id"]))
            for r in fetchall(self._cur)
        ]


class MySQLAddressRepository(AddressRepository):
    def __init__(self, cur):
        self._cur = cur

    def get_by_id(self, address_id: int) -> Optional[Address]:
        self._cur.execute(
            """
            SELECT address_id, street_name, street_number, neighborhood, postal_code, city_id, address_type
            FROM addresses
            WHERE address_id=%s
            """,
            (int(address_id),),
        )
        r = fetchone(self._cur)
        if not r:
            return None
        return Address(
            address_id=int(r["address_id"]),
            street_name=r["street_name"],
            street_number=r["street_number"],
            neighborhood=r.get("neighborhood"),
            postal_code=r.get("postal_code"),
            city_id=int(r["city_id"]),
            address_type=AddressType(r["address_type"]),
        )

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
        self._cur.execute(
            """
            INSERT INTO addresses(street_name, street_number, neighborhood, postal_code, city_id, address_type)
            VALUES(%s,%s,%s,%s,%s,%s)
            """,
            (street_name, street_number, neighborhood, postal_code, int(city_id), address_type.value),
        )
        return int(self._cur.lastrowid)

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
        self._cur.execute(
            """
            UPDATE addresses
            SET street_name=%s, street_number=%s, neighborhood=%s, postal_code=%s, city_id=%s, address_type=%s
            WHERE address_id=%s
            """,
            (street_name, street_number, neighborhood, postal_code, int(city_id), address_type.value, int(address_id)),
        )
        return self._cur.rowcount > 0
