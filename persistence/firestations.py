from __future__ import annotations

import logging

from .collection_accessor import CollectionAccessor
from .errors import Outcome
from .interfaces import DocumentStore
from .models import Firestation
from .repository import JsonCollectionRepository, same_text

logger = logging.getLogger(__name__)


def at_address(address: str):
    return lambda firestation: same_text(firestation.address, address)


def with_station_number(station_number: int):
    return lambda firestation: firestation.station == station_number


class FirestationRepository(JsonCollectionRepository[Firestation]):
    """
    Firestation mappings (address -> station number).

    Addresses are matched case-insensitively; uniqueness is not enforced.
    """

    label = "firestation"

    def __init__(self, store: DocumentStore):
        super().__init__(store, CollectionAccessor("firestations", Firestation))

    def key_of(self, entity: Firestation) -> str:
        return f"at {entity.address} (station n°{entity.station})"

    def same_key(self, a: Firestation, b: Firestation) -> bool:
        return same_text(a.address, b.address)

    def find_by_address(self, address: str) -> Firestation | None:
        found = self.find_first(at_address(address))
        logger.debug("Found station %s at address %s.", found, address)
        return found

    def find_by_station_number(self, station_number: int) -> list[Firestation]:
        return self.find_by(with_station_number(station_number))

    def delete_by_address(self, address: str) -> Outcome[list[Firestation]]:
        return self.delete_where(at_address(address), key=f"address {address}")

    def delete_by_station_number(self, station_number: int) -> Outcome[list[Firestation]]:
        return self.delete_where(with_station_number(station_number), key=f"station number {station_number}")
