"""Descriptor stories: lineage, member lookup, overload selection, destructors."""

from __future__ import annotations

import pytest

from typebridge.domain.descriptors import Member, Overload, TypeDescriptor
from typebridge.domain.enums import MemberKind


class _Base: ...


class _Mid(_Base): ...


class _Leaf(_Mid): ...


def _destroy(_instance: object) -> None: ...


@pytest.fixture
def chain() -> tuple[TypeDescriptor, TypeDescriptor, TypeDescriptor]:
    base = TypeDescriptor(
        _Base,
        "Base",
        members=[Member.readwrite("name"), Member.method("describe")],
        destructor=_destroy,
    )
    mid = TypeDescriptor(_Mid, "Mid", parent=base, members=[Member.readonly("name")])
    leaf = TypeDescriptor(_Leaf, "Leaf", parent=mid, members=[Member.method("leaf_only")])
    return base, mid, leaf


@pytest.mark.os_agnostic
def test_lineage_walks_from_descriptor_to_root(chain: tuple[TypeDescriptor, ...]) -> None:
    base, mid, leaf = chain

    assert list(leaf.lineage()) == [leaf, mid, base]
    assert leaf.root is base
    assert base.root is base


@pytest.mark.os_agnostic
def test_is_subtype_of_follows_parent_links_only_upwards(chain: tuple[TypeDescriptor, ...]) -> None:
    base, mid, leaf = chain

    assert leaf.is_subtype_of(base)
    assert leaf.is_subtype_of(leaf)
    assert not base.is_subtype_of(mid)


@pytest.mark.os_agnostic
def test_find_member_prefers_the_nearest_definition(chain: tuple[TypeDescriptor, ...]) -> None:
    """A member redeclared on a subclass shadows the ancestor's kind."""
    base, _mid, leaf = chain

    assert base.find_member("name").kind is MemberKind.PROPERTY  # type: ignore[union-attr]
    assert leaf.find_member("name").kind is MemberKind.READONLY  # type: ignore[union-attr]
    assert leaf.find_member("describe") is not None
    assert base.find_member("leaf_only") is None


@pytest.mark.os_agnostic
def test_member_names_lists_own_members_first_without_duplicates(chain: tuple[TypeDescriptor, ...]) -> None:
    _base, _mid, leaf = chain

    assert leaf.member_names() == ["leaf_only", "name", "describe"]


@pytest.mark.os_agnostic
def test_destructor_is_inherited_from_nearest_ancestor(chain: tuple[TypeDescriptor, ...]) -> None:
    _base, mid, leaf = chain

    assert leaf.find_destructor() is _destroy
    assert mid.destructor is None


@pytest.mark.os_agnostic
def test_members_mapping_is_read_only() -> None:
    descriptor = TypeDescriptor(_Base, "Base", members={"x": Member.readonly("x")})

    with pytest.raises(TypeError):
        descriptor.members["y"] = Member.readonly("y")  # type: ignore[index]


@pytest.mark.os_agnostic
def test_descriptor_fields_cannot_be_reassigned() -> None:
    descriptor = TypeDescriptor(_Base, "Base")

    with pytest.raises(AttributeError):
        descriptor.polymorphic = True  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_empty_exposed_name_is_rejected() -> None:
    with pytest.raises(ValueError, match="name must not be empty"):
        TypeDescriptor(_Base, "")


@pytest.mark.os_agnostic
def test_descriptors_compare_by_identity() -> None:
    first = TypeDescriptor(_Base, "Base")
    twin = TypeDescriptor(_Base, "Base")

    assert first == first
    assert first != twin
    assert len({first, twin}) == 2


@pytest.mark.os_agnostic
def test_repr_names_parent_and_polymorphism(chain: tuple[TypeDescriptor, ...]) -> None:
    _base, mid, _leaf = chain

    assert repr(mid) == "TypeDescriptor(name='Mid', parent='Base', polymorphic=False)"


# ======================== Overloads ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("args", "expected_target"),
    [
        ((7,), "set_age"),
        (("Rocky",), "set_name"),
        (("Rocky", 7), "set_both"),
    ],
)
def test_select_overload_picks_the_matching_signature(args: tuple[object, ...], expected_target: str) -> None:
    member = Member.method(
        "set",
        "",
        Overload((int,), "set_age"),
        Overload((str,), "set_name"),
        Overload((str, int), "set_both"),
    )

    selected = member.select_overload(args)

    assert selected is not None
    assert selected.target == expected_target


@pytest.mark.os_agnostic
@pytest.mark.parametrize("args", [(True,), (1.5,), (), (1, 2)])
def test_select_overload_returns_none_without_a_match(args: tuple[object, ...]) -> None:
    member = Member.method("set", "", Overload((int,), "set_age"))

    assert member.select_overload(args) is None


@pytest.mark.os_agnostic
def test_bool_parameter_accepts_bool() -> None:
    assert Overload((bool,), "toggle").accepts((False,))


@pytest.mark.os_agnostic
def test_overload_signature_lists_parameter_type_names() -> None:
    assert Overload((str, int), "x").signature == "(str, int)"


@pytest.mark.os_agnostic
def test_named_overload_signature_shows_parameter_names() -> None:
    assert Overload((str, int), "x", param_names=("name", "age")).signature == "(name: str, age: int)"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("args", "kwargs", "expected"),
    [
        (("Rocky", 3), {}, ("Rocky", 3)),
        (("Rocky",), {"age": 3}, ("Rocky", 3)),
        ((), {"age": 3, "name": "Rocky"}, ("Rocky", 3)),
        ((), {"name": "Rocky"}, None),
        (("Rocky",), {"name": "Molly"}, None),
        ((), {"name": "Rocky", "age": True}, None),
        ((), {"name": "Rocky", "age": 3, "owner": "Alice"}, None),
    ],
)
def test_bind_maps_keywords_onto_parameter_order(
    args: tuple[object, ...], kwargs: dict[str, object], expected: tuple[object, ...] | None
) -> None:
    overload = Overload((str, int), "set_both", param_names=("name", "age"))

    assert overload.bind(args, kwargs) == expected


@pytest.mark.os_agnostic
def test_unnamed_overload_binds_positionally_only() -> None:
    overload = Overload((int,), "set_age")

    assert overload.bind((3,)) == (3,)
    assert overload.bind((), {"age": 3}) is None


@pytest.mark.os_agnostic
def test_overload_rejects_a_name_count_mismatch() -> None:
    with pytest.raises(ValueError, match="1 names for 2 parameters"):
        Overload((str, int), "set_both", param_names=("name",))


@pytest.mark.os_agnostic
def test_select_overload_honours_keywords() -> None:
    member = Member.method(
        "set",
        "",
        Overload((int,), "set_age", param_names=("age",)),
        Overload((str,), "set_name", param_names=("name",)),
    )

    selected = member.select_overload((), {"name": "Rocky"})

    assert selected is not None
    assert selected.target == "set_name"


@pytest.mark.os_agnostic
def test_native_name_defaults_to_the_exposed_name() -> None:
    assert Member.method("bark").native_name == "bark"
    assert Member.readwrite("petName", attr="name").native_name == "name"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "writable"),
    [
        (Member.readwrite("owner"), True),
        (Member.readonly("kind"), False),
        (Member.method("bark"), False),
    ],
)
def test_only_read_write_properties_are_writable(member: Member, writable: bool) -> None:
    assert member.writable is writable
