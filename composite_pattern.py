from abc import ABC, abstractmethod
from typing import Optional, Tuple
import weakref


class Component(ABC):
    _parent_ref = None

    @property
    def parent(self) -> Optional['Composite']:
        # Children only point back weakly; the parent owns the edge.
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, parent: Optional['Composite']) -> None:
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    def add(self, component: 'Component') -> None:
        pass

    def remove(self, component: 'Component') -> None:
        pass

    def is_composite(self) -> bool:
        return False

    @abstractmethod
    def operation(self) -> str:
        pass


class Leaf(Component):
    def operation(self) -> str:
        return "Leaf"


class Composite(Component):
    def __init__(self):
        self._children = []

    @property
    def children(self) -> Tuple[Component, ...]:
        return tuple(self._children)

    def add(self, component: Component) -> None:
        self._children.append(component)
        component.parent = self

    def remove(self, component: Component) -> None:
        for index, child in enumerate(self._children):
            if child is component:
                del self._children[index]
                component.parent = None
                return

    def is_composite(self) -> bool:
        return True

    def operation(self) -> str:
        results = []
        for child in self._children:
            results.append(child.operation())
        return f"Branch({' '.join(results)})"


def client_code(component: Component) -> str:
    result = f"Result: {component.operation()}"
    print(result)
    return result


def more_complex_client_code(left: Component, right: Component) -> str:
    """Add right under left only if left can hold children"""
    if left.is_composite():
        left.add(right)
    return client_code(left)


def main():
    print("Client: I've got a simple component:")
    client_code(Leaf())

    tree = Composite()

    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())

    branch2 = Composite()
    branch2.add(Leaf())
    branch2.add(Leaf())

    tree.add(branch1)
    tree.add(branch2)

    print("\nClient: Now I've got a composite tree:")
    client_code(tree)

    print("\nClient: I don't need to check the components classes even when managing the tree:")
    more_complex_client_code(tree, Leaf())


if __name__ == "__main__":
    main()
