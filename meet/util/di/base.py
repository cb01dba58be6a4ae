"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have a test double; build_test_container can unmock them
Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka Provider carrying swap metadata.

    Attributes:
        __mock_component__: Set on the base of a swappable component
        __is_mock__: True on the test implementation of that component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
