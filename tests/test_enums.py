import pytest

from gltf_lite.enums import (
    AlphaMode,
    BufferViewTarget,
    ComponentType,
    Filter,
    PrimitiveMode,
    WrapMode,
    domain_name,
)
from gltf_lite.exceptions import InvalidEnumCode


@pytest.mark.parametrize(
    "code, member, size",
    [
        (5120, ComponentType.BYTE, 1),
        (5121, ComponentType.UNSIGNED_BYTE, 1),
        (5122, ComponentType.SHORT, 2),
        (5123, ComponentType.UNSIGNED_SHORT, 2),
        (5125, ComponentType.UNSIGNED_INT, 4),
        (5126, ComponentType.FLOAT, 4),
    ],
)
def test_component_type_codes_and_sizes(code, member, size):
    component_type = ComponentType.from_code(code)
    assert component_type is member
    assert component_type.byte_size() == size


@pytest.mark.parametrize("code", [0, -1, 5119, 5124, 5127, 34962, 5126.0, "5126", True, None])
def test_component_type_rejects_other_codes(code):
    with pytest.raises(InvalidEnumCode) as excinfo:
        ComponentType.from_code(code)
    assert excinfo.value.domain == "component_type"
    assert excinfo.value.value == code


def test_primitive_mode_range():
    assert [PrimitiveMode.from_code(code) for code in range(7)] == list(PrimitiveMode)
    with pytest.raises(InvalidEnumCode) as excinfo:
        PrimitiveMode.from_code(7)
    assert excinfo.value.domain == "primitive_mode"


@pytest.mark.parametrize(
    "enum_cls, valid, invalid, domain",
    [
        (Filter, 9987, 9730, "filter"),
        (WrapMode, 33648, 10496, "wrap_mode"),
        (BufferViewTarget, 34963, 34964, "buffer_view_target"),
    ],
)
def test_sampler_and_target_domains(enum_cls, valid, invalid, domain):
    assert enum_cls.from_code(valid) == valid
    with pytest.raises(InvalidEnumCode) as excinfo:
        enum_cls.from_code(invalid)
    assert excinfo.value.domain == domain
    assert excinfo.value.value == invalid


def test_alpha_mode_is_a_string_tag():
    assert AlphaMode.from_code("BLEND") is AlphaMode.BLEND
    assert AlphaMode.MASK == "MASK"
    for bad in ("mask", "", 0):
        with pytest.raises(InvalidEnumCode) as excinfo:
            AlphaMode.from_code(bad)
        assert excinfo.value.domain == "alpha_mode"


def test_domain_name():
    assert domain_name(ComponentType) == "component_type"
    assert domain_name(Filter) == "filter"
