"""
schemas/users.py
----------------

Pydantic models for the ``users`` resource.  ``User`` mirrors the full
record returned by the API, including the nested address, geo
coordinates and company.  ``UserPayload`` is the partial form accepted
for create and update bodies: every field is optional and only the
fields actually set are sent upstream.

Field names follow the upstream JSON (``catchPhrase`` included).
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel


class Geo(BaseModel):
    lat: str
    lng: str


class Address(BaseModel):
    street: str
    suite: str
    city: str
    zipcode: str
    geo: Geo


class Company(BaseModel):
    name: str
    catchPhrase: str
    bs: str


class User(BaseModel):
    id: int
    name: str
    username: str
    email: str
    address: Address
    phone: str
    website: str
    company: Company


class UserPayload(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    address: Optional[Address] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    company: Optional[Company] = None
