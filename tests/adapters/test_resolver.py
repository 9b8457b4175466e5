from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, ClassVar, NamedTuple, Optional, Union

import pytest

from lib_log_mask.adapters.resolver import ReflectionFieldResolver
from lib_log_mask.domain.descriptors import INACCESSIBLE, PLAIN, FieldDescriptor, Sensitive, sensitive
from lib_log_mask.domain.strategies import MaskStrategy


@dataclass
class Base:
    id: int
    token: str = sensitive()


@dataclass
class Derived(Base):
    note: str = ""
    counter: ClassVar[int] = 0


@dataclass
class Overridden:
    pin: Annotated[str, Sensitive(strategy=MaskStrategy.LAST_FOUR)] = sensitive(mask_char="#")


class Plain:
    label: str
    secret: Annotated[str, Sensitive()]
    maybe: Optional[Annotated[str, Sensitive(strategy=MaskStrategy.FIRST_LAST)]]
    either: Union[int, Annotated[str, Sensitive()], None]
    shared: ClassVar[Annotated[str, Sensitive()]] = "class level"

    def __init__(self) -> None:
        self.label = "l"
        self.secret = "s"
        self.maybe = None
        self.either = 1
        self.__hidden = "mangled"


class PlainChild(Plain):
    extra: Annotated[str, Sensitive(mask_char="-")]

    def __init__(self) -> None:
        super().__init__()
        self.extra = "e"


class SlottedBase:
    __slots__ = ("first",)


class Slotted(SlottedBase):
    __slots__ = ("second", "missing", "__private")
    second: Annotated[str, Sensitive()]

    def __init__(self) -> None:
        self.first = 1
        self.second = "two"
        self.__private = 3


class Broken:
    payload: "UndefinedName"  # noqa: F821
    secret: Annotated[str, Sensitive()]

    def __init__(self) -> None:
        self.payload = 1
        self.secret = "x"


class Creds(NamedTuple):
    user: str
    password: Annotated[str, Sensitive()]


def _names(resolver: ReflectionFieldResolver, obj: object) -> list[str]:
    return [field.name for field in resolver.resolve_fields(obj)]


def test_dataclass_fields_in_declaration_order(resolver: ReflectionFieldResolver) -> None:
    fields = resolver.resolve_fields(Derived(1, "t", "n"))
    assert [field.name for field in fields] == ["id", "token", "note"]
    assert [field.descriptor.sensitive for field in fields] == [False, True, False]
    assert fields[1].value == "t"


def test_dataclass_metadata_overrides_annotated_hint(resolver: ReflectionFieldResolver) -> None:
    descriptor = resolver.descriptors_for(Overridden)["pin"]
    assert descriptor == FieldDescriptor(sensitive=True, strategy=MaskStrategy.FULL, mask_char="#")


def test_plain_class_annotations(resolver: ReflectionFieldResolver) -> None:
    descriptors = resolver.descriptors_for(Plain)
    assert set(descriptors) == {"secret", "maybe", "either"}
    assert descriptors["maybe"].strategy is MaskStrategy.FIRST_LAST
    assert _names(resolver, Plain()) == ["label", "secret", "maybe", "either", "_Plain__hidden"]


def test_inherited_annotations(resolver: ReflectionFieldResolver) -> None:
    descriptors = resolver.descriptors_for(PlainChild)
    assert descriptors["secret"].sensitive
    assert descriptors["extra"].mask_char == "-"
    assert _names(resolver, PlainChild())[-1] == "extra"


def test_slots_base_first_and_unset_slots_skipped(resolver: ReflectionFieldResolver) -> None:
    fields = resolver.resolve_fields(Slotted())
    assert [field.name for field in fields] == ["first", "second", "_Slotted__private"]
    assert fields[1].descriptor.sensitive


def test_unknown_fields_use_plain_descriptor(resolver: ReflectionFieldResolver) -> None:
    fields = resolver.resolve_fields(Plain())
    assert fields[0].descriptor is PLAIN


def test_unresolvable_hints_do_not_hide_markers(resolver: ReflectionFieldResolver) -> None:
    assert resolver.has_sensitive_fields(Broken)
    assert _names(resolver, Broken()) == ["payload", "secret"]


def test_has_sensitive_fields(resolver: ReflectionFieldResolver) -> None:
    assert resolver.has_sensitive_fields(Base)
    assert not resolver.has_sensitive_fields(dict)
    assert not resolver.has_sensitive_fields(int)


def test_descriptor_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[type] = []
    original = ReflectionFieldResolver._build_descriptors

    def counting(cls: type):
        calls.append(cls)
        return original(cls)

    monkeypatch.setattr(ReflectionFieldResolver, "_build_descriptors", staticmethod(counting))

    cached = ReflectionFieldResolver()
    cached.descriptors_for(Base)
    cached.descriptors_for(Base)
    assert calls == [Base]

    cached.clear_cache()
    cached.descriptors_for(Base)
    assert calls == [Base, Base]

    calls.clear()
    uncached = ReflectionFieldResolver(cache=False)
    uncached.descriptors_for(Base)
    uncached.descriptors_for(Base)
    assert calls == [Base, Base]


def test_descriptor_mapping_is_read_only(resolver: ReflectionFieldResolver) -> None:
    with pytest.raises(TypeError):
        resolver.descriptors_for(Base)["token"] = PLAIN  # type: ignore[index]


@dataclass
class Flaky:
    value: int

    def __getattribute__(self, item: str):
        if item == "value":
            raise PermissionError("denied")
        return super().__getattribute__(item)


def test_unreadable_dataclass_field_is_inaccessible(resolver: ReflectionFieldResolver) -> None:
    (field,) = resolver.resolve_fields(Flaky(1))
    assert field.value is INACCESSIBLE
    assert not field.accessible


def test_named_tuple_fields_in_declaration_order(resolver: ReflectionFieldResolver) -> None:
    fields = resolver.resolve_fields(Creds("john", "hunter2"))
    assert [(field.name, field.value) for field in fields] == [("user", "john"), ("password", "hunter2")]
    assert [field.descriptor.sensitive for field in fields] == [False, True]
    assert resolver.has_sensitive_fields(Creds)
