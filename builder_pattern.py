from abc import ABC, abstractmethod
from typing import List, Optional


class Builder(ABC):
    """Declares the steps for building the parts of a product"""

    @property
    @abstractmethod
    def product(self):
        pass

    @abstractmethod
    def produce_part_a(self) -> None:
        raise NotImplementedError(f"{type(self).__name__} has not implemented method 'produce_part_a'")

    @abstractmethod
    def produce_part_b(self) -> None:
        raise NotImplementedError(f"{type(self).__name__} has not implemented method 'produce_part_b'")

    @abstractmethod
    def produce_part_c(self) -> None:
        raise NotImplementedError(f"{type(self).__name__} has not implemented method 'produce_part_c'")


class Product1:
    def __init__(self):
        self.parts: List[str] = []

    def add(self, part: str) -> None:
        self.parts.append(part)

    def list_parts(self) -> str:
        line = f"Product parts: {', '.join(self.parts)}"
        print(line)
        return line


class ConcreteBuilder1(Builder):
    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._product = Product1()

    @property
    def product(self) -> Product1:
        """Hand over the finished product and start a blank one"""
        product = self._product
        self.reset()
        return product

    def produce_part_a(self) -> None:
        self._product.add("PartA1")

    def produce_part_b(self) -> None:
        self._product.add("PartB1")

    def produce_part_c(self) -> None:
        self._product.add("PartC1")


class Director:
    """Runs the building steps in a fixed order on whichever builder it holds"""

    def __init__(self):
        self._builder: Optional[Builder] = None

    @property
    def builder(self) -> Optional[Builder]:
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def _require_builder(self) -> Builder:
        if self._builder is None:
            raise ValueError("Director has no builder configured")
        return self._builder

    def build_minimal_viable_product(self) -> None:
        self._require_builder().produce_part_a()

    def build_full_featured_product(self) -> None:
        builder = self._require_builder()
        builder.produce_part_a()
        builder.produce_part_b()
        builder.produce_part_c()


def main():
    director = Director()
    builder = ConcreteBuilder1()
    director.builder = builder

    print("Standard basic product: ")
    director.build_minimal_viable_product()
    builder.product.list_parts()

    print("\n")

    print("Standard full featured product: ")
    director.build_full_featured_product()
    builder.product.list_parts()

    print("\n")

    # The builder works without a director too
    print("Custom product: ")
    builder.produce_part_a()
    builder.produce_part_b()
    builder.product.list_parts()


if __name__ == "__main__":
    main()
