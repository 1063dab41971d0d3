from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Cleaned(Generic[T]):
    """
    Outcome of a successful clean: the marker segment was found and the
    value has been reduced to its canonical form.
    """
    value: T

    @property
    def is_cleaned(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> 'Cleaned[U]':
        return Cleaned(fn(self.value))


@dataclass(frozen=True)
class Original(Generic[T]):
    """
    Outcome when no product page could be identified; the value is passed
    through untouched.
    """
    value: T

    @property
    def is_cleaned(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> 'Original[U]':
        return Original(fn(self.value))


Clean = Union[Cleaned[T], Original[T]]


@dataclass
class Item:
    """
    A single result row handed back to the launcher.
    arg is what the launcher acts on; it is left out for invalid rows.
    """
    title: str
    arg: str | None = None
    subtitle: str | None = None
    valid: bool = True

    def to_dict(self):
        data = {'title': self.title}
        if self.arg is not None:
            data['arg'] = self.arg
        if self.subtitle is not None:
            data['subtitle'] = self.subtitle
        data['valid'] = self.valid
        return data
