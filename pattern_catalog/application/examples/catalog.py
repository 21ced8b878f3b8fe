"""The built-in catalogue of design-pattern examples."""
from itertools import islice
from typing import Iterable, Optional

from pattern_catalog.application.examples.registry import ExampleRegistry
from pattern_catalog.config.schemas import ExamplesConfig
from pattern_catalog.domain.organization import Directory, Employee, EmployeeFactory
from pattern_catalog.domain.patterns.abstract_factory import (
    DesktopComputerSystemFactory,
    MobilePhoneSystemFactory,
)
from pattern_catalog.domain.patterns.bridge import French, Page
from pattern_catalog.domain.patterns.builder import Client
from pattern_catalog.domain.patterns.hero import ClassicalHero
from pattern_catalog.domain.patterns.iterator import FibonacciSequence, RandomGenerator
from pattern_catalog.domain.patterns.letters import O, T
from pattern_catalog.domain.patterns.notification import NotificationCenter
from pattern_catalog.domain.patterns.observer import Publisher
from pattern_catalog.domain.patterns.playwright import Director
from pattern_catalog.domain.patterns.prototype import Person


def format_employees(employees: Optional[Iterable[Employee]]) -> str:
    if employees is None:
        return "None"
    return "[" + ", ".join(str(e) for e in employees) + "]"


def register_catalog(registry: ExampleRegistry, config: Optional[ExamplesConfig] = None) -> ExampleRegistry:
    """Register every catalogued example on ``registry``, in catalogue order."""
    if config is None:
        config = ExamplesConfig()

    @registry.example("Iterator pattern", pattern="iterator")
    def iterator_pattern() -> None:
        for value in islice(FibonacciSequence(), config.fibonacci_count):
            print(value)

    @registry.example("Using a custom collection", pattern="iterator")
    def custom_collection() -> None:
        generator = RandomGenerator(config.random_count, config.random_upper, config.random_seed)
        for value in generator:
            print(f"Random: {value}")

    @registry.example("Observer pattern", pattern="observer")
    def observer_pattern() -> None:
        publisher = Publisher()
        publisher.subscribe(lambda value: print(f"Wow! {value} got published! So excited!"))
        publisher.subscribe(
            lambda value: print(f"Amazing, I always knew {value} will get published at some point!")
        )
        publisher.publish(123)
        publisher.publish(456)

    @registry.example("Notification center", pattern="observer")
    def notification_center() -> None:
        center = NotificationCenter()
        center.add_observer("cool", lambda num: print(num))
        center.add_observer("bar", lambda num: print("hmmm ", num))
        center.trigger(20)
        center.remove_observer("bar")
        center.trigger(21)

    @registry.example("Builder pattern", pattern="builder")
    def builder_pattern() -> None:
        for profile in Client().main():
            print(profile)

    @registry.example("Simple Factory", pattern="simple factory")
    def simple_factory() -> None:
        directory = Directory()
        factory = EmployeeFactory(directory)
        factory.new("John", 24, "Sales")
        factory.new("Mary", 21, "Sales")
        factory.new("Todd", 21, "Information Group")

        directory.add_department("Marketing")
        for department in directory:
            print(department)
        print(format_employees(directory.employees_of("Information Group")))
        print(format_employees(directory.employees_of("Sales")))
        sales = directory.get("Sales")
        print(format_employees(sales.employees if sales is not None else None))

    @registry.example("Playwright Pattern", pattern="playwright")
    def playwright_pattern() -> None:
        Director().action()

    @registry.example("Factory method", pattern="factory method")
    def factory_method() -> None:
        hero = ClassicalHero()
        hero.name = "Classy Quinn"
        hero.run()

    @registry.example("Abstract Factory", pattern="abstract factory")
    def abstract_factory() -> None:
        desktop = DesktopComputerSystemFactory.make_computer()
        hdd = DesktopComputerSystemFactory.make_storage()
        phone = MobilePhoneSystemFactory.make_computer()
        internal_memory = MobilePhoneSystemFactory.make_storage()
        print(desktop, hdd)
        print(phone, internal_memory)

    @registry.example("Prototype", pattern="prototype")
    def prototype() -> None:
        john = Person("John")
        print(john.copy())

    @registry.example("Bridge", pattern="bridge")
    def bridge() -> None:
        print(Page(French()).render())

    @registry.example("Nested letters", pattern="decorator chain")
    def nested_letters() -> None:
        word = O(T(None))
        print(word.value())
        print(word.spell())
        print("Done")

    return registry


def create_catalog(config: Optional[ExamplesConfig] = None) -> ExampleRegistry:
    """Fresh registry holding the full catalogue."""
    return register_catalog(ExampleRegistry(), config)
