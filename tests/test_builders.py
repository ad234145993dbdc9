import pytest

from graftwork.builders import make_container
from graftwork.domain import IdentifierState
from graftwork.errors import CyclicDependencyError


class Printer:
    pass


class Report:
    def __init__(self, printer: Printer, title: str):
        self.printer = printer
        self.title = title


def test_make_container_registers_bindings_and_singletons():
    container = make_container(
        bindings={Printer: Printer, "clock": lambda c: object()},
        singletons={"title": "Quarterly"},
    )

    report = container.resolve(Report)

    assert isinstance(report.printer, Printer)
    assert report.title == "Quarterly"
    assert container.resolve("clock") is not container.resolve("clock")


def test_shared_identifiers_cache_first_result():
    container = make_container(
        bindings={"clock": lambda c: object()},
        shared=["clock"],
    )

    assert container.state_of("clock") is IdentifierState.BOUND
    assert container.resolve("clock") is container.resolve("clock")


def test_singleton_value_wins_over_shared_slot():
    container = make_container(
        bindings={"clock": lambda c: "fresh"},
        singletons={"clock": "cached"},
        shared=["clock"],
    )

    assert container.resolve("clock") == "cached"


def test_cycle_detection_is_configurable():
    bindings = {"a": lambda c: c.resolve("b"), "b": lambda c: c.resolve("a")}

    with pytest.raises(CyclicDependencyError):
        make_container(bindings).resolve("a")

    with pytest.raises(RecursionError):
        make_container(bindings, detect_cycles=False).resolve("a")
