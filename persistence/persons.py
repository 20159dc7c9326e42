from __future__ import annotations

from .collection_accessor import CollectionAccessor
from .errors import Outcome
from .interfaces import DocumentStore
from .models import Person
from .repository import JsonCollectionRepository, same_text


def named(first_name: str, last_name: str):
    return lambda record: same_text(record.firstName, first_name) and same_text(record.lastName, last_name)


class PersonRepository(JsonCollectionRepository[Person]):
    label = "person"

    def __init__(self, store: DocumentStore):
        super().__init__(store, CollectionAccessor("persons", Person))

    def key_of(self, entity: Person) -> str:
        return f"{entity.firstName} {entity.lastName}"

    def same_key(self, a: Person, b: Person) -> bool:
        return named(b.firstName, b.lastName)(a)

    def find_by_name(self, first_name: str, last_name: str) -> Person | None:
        return self.find_first(named(first_name, last_name))

    def find_by_address(self, address: str) -> list[Person]:
        return self.find_by(lambda person: same_text(person.address, address))

    def find_by_city(self, city: str) -> list[Person]:
        return self.find_by(lambda person: same_text(person.city, city))

    def delete_by_name(self, first_name: str, last_name: str) -> Outcome[list[Person]]:
        return self.delete_where(named(first_name, last_name), key=f"{first_name} {last_name}")
