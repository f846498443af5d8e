"""Tests for thread safety of ComponentFactory."""

import threading
from typing import Any

from compwire import ClassRuntime, ComponentFactory


def _cyclic_components(count: int) -> dict[str, Any]:
    return {
        f"node{index}": {"components": {"next": f"node{(index + 1) % count}", "me": "self"}}
        for index in range(count)
    }


class TestConcurrentResolution:
    def test_concurrent_lookup_returns_same_class(self, runtime: ClassRuntime) -> None:
        """Concurrent resolution of a cyclic graph yields one class per name."""
        factory = ComponentFactory({"runtime": runtime, "components": _cyclic_components(20)})
        results: list[tuple[int, type[Any]]] = []
        errors: list[Exception] = []
        barrier = threading.Barrier(10)

        def resolve(index: int) -> None:
            try:
                barrier.wait()
                results.append((index, factory.get_component_class(f"node{index}")))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=resolve, args=(i,)) for i in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        classes = factory.get_all_component_classes()
        assert all(component_class is classes[f"node{index}"] for index, component_class in results)
        for component_class in classes.values():
            assert component_class.components["me"] is component_class
        for index in range(20):
            next_class = classes[f"node{(index + 1) % 20}"]
            assert classes[f"node{index}"].components["next"] is next_class

    def test_concurrent_registration_no_corruption(self, runtime: ClassRuntime) -> None:
        """Concurrent registration keeps exactly one value per name."""
        factory = ComponentFactory({"runtime": runtime})
        errors: list[Exception] = []

        def register(index: int) -> None:
            try:
                for name_index in range(50):
                    factory.add_component(f"c{name_index}", {"owner": index})
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=register, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        classes = factory.get_all_component_classes()
        assert len(classes) == 50
