import pytest

from builder_pattern import Builder, ConcreteBuilder1, Director, Product1, main


class HalfBuilder(Builder):
    """Builder that leaves step C to the base class"""

    def __init__(self):
        self._product = Product1()

    @property
    def product(self):
        return self._product

    def produce_part_a(self):
        self._product.add("A")

    def produce_part_b(self):
        self._product.add("B")

    def produce_part_c(self):
        super().produce_part_c()


def test_builder_collects_parts_in_order():
    builder = ConcreteBuilder1()
    builder.produce_part_a()
    builder.produce_part_b()
    assert builder.product.parts == ["PartA1", "PartB1"]


def test_reading_product_resets_builder():
    builder = ConcreteBuilder1()
    builder.produce_part_a()
    builder.produce_part_b()
    first = builder.product
    second = builder.product

    assert first.parts == ["PartA1", "PartB1"]
    assert second.parts == []
    assert second is not first


def test_director_minimal_and_full_products():
    director = Director()
    builder = ConcreteBuilder1()
    director.builder = builder

    director.build_minimal_viable_product()
    assert builder.product.parts == ["PartA1"]

    director.build_full_featured_product()
    assert builder.product.parts == ["PartA1", "PartB1", "PartC1"]


def test_director_can_be_repointed():
    director = Director()
    first, second = ConcreteBuilder1(), ConcreteBuilder1()

    director.builder = first
    director.build_minimal_viable_product()
    director.builder = second
    director.build_minimal_viable_product()

    assert director.builder is second
    assert first.product.parts == ["PartA1"]
    assert second.product.parts == ["PartA1"]


def test_director_without_builder_raises():
    director = Director()
    assert director.builder is None
    with pytest.raises(ValueError):
        director.build_full_featured_product()


def test_unimplemented_step_raises():
    builder = HalfBuilder()
    builder.produce_part_a()
    with pytest.raises(NotImplementedError, match="HalfBuilder has not implemented method 'produce_part_c'"):
        builder.produce_part_c()


def test_abstract_builder_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Builder()


def test_list_parts(capsys):
    product = Product1()
    product.add("PartA1")
    product.add("PartC1")
    assert product.list_parts() == "Product parts: PartA1, PartC1"
    assert capsys.readouterr().out == "Product parts: PartA1, PartC1\n"


def test_main_demo(capsys):
    main()
    out = capsys.readouterr().out
    assert "Product parts: PartA1\n" in out
    assert "Product parts: PartA1, PartB1, PartC1\n" in out
    assert "Product parts: PartA1, PartB1\n" in out
