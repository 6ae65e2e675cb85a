from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple
import json


# ==================== Demo Data ====================

INITIAL_CARS: List[Tuple[str, str, str]] = [
    ("Chevrolet", "Camaro2018", "pink"),
    ("Mercedes Benz", "C300", "black"),
    ("Mercedes Benz", "C500", "red"),
    ("BMW", "M5", "red"),
    ("BMW", "X6", "white"),
]


# ==================== Flyweight ====================

@dataclass(frozen=True)
class Flyweight:
    """Holds state shared by many cars; unique state comes in per call"""
    shared_state: Tuple[str, ...]

    def operation(self, unique_state: Sequence[str]) -> str:
        s = json.dumps(list(self.shared_state))
        u = json.dumps(list(unique_state))
        message = f"Flyweight: Displaying shared ({s}) and unique ({u}) state."
        print(message)
        return message


# ==================== Factory ====================

class FlyweightFactory:
    """
    Creates flyweights on demand and hands out the cached instance
    whenever the same shared state is requested again
    """

    def __init__(self, initial_flyweights: Iterable[Sequence[str]] = ()):
        self._flyweights: Dict[str, Flyweight] = {}
        for state in initial_flyweights:
            self._flyweights[self.get_key(state)] = Flyweight(tuple(state))

    @staticmethod
    def get_key(state: Sequence[str]) -> str:
        """Canonical key: sorted attributes joined by underscores"""
        # Sorting makes permutations of the same attributes share one entry.
        return "_".join(sorted(state))

    def get_flyweight(self, shared_state: Sequence[str]) -> Flyweight:
        """Return the existing flyweight for this state or create one"""
        key = self.get_key(shared_state)

        if key not in self._flyweights:
            print("FlyweightFactory: Can't find a flyweight, creating new one.")
            self._flyweights[key] = Flyweight(tuple(shared_state))
        else:
            print("FlyweightFactory: Reusing existing flyweight.")

        return self._flyweights[key]

    def list_flyweights(self) -> List[str]:
        keys = list(self._flyweights.keys())
        print(f"FlyweightFactory: I have {len(keys)} flyweights:")
        for key in keys:
            print(key)
        return keys

    def __len__(self) -> int:
        return len(self._flyweights)

    def __contains__(self, key: str) -> bool:
        return key in self._flyweights


# ==================== Client ====================

def add_car_to_police_database(factory: FlyweightFactory, plates: str, owner: str,
                               brand: str, model: str, color: str) -> Flyweight:
    print("\n\nClient: Adding a car to database.")
    flyweight = factory.get_flyweight((brand, model, color))
    # Plates and owner are unique per car and never cached.
    flyweight.operation((plates, owner))
    return flyweight


def main():
    factory = FlyweightFactory(INITIAL_CARS)
    factory.list_flyweights()

    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "M5", "red")
    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "X1", "red")

    print("\n")
    factory.list_flyweights()


if __name__ == "__main__":
    main()
