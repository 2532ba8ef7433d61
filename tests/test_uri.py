import pytest

from gltf_lite.core.uri import ExternalReference, InlineBytes, classify
from gltf_lite.exceptions import MalformedBase64, UnsupportedDataUri


def test_octet_stream_data_uri_is_inline():
    result = classify("data:application/octet-stream;base64,QQ==")
    assert result == InlineBytes(bytes([0x41]))


@pytest.mark.parametrize("media_type", ["image/jpeg", "image/png"])
def test_image_data_uris_are_inline(media_type):
    result = classify(f"data:{media_type};base64,iVBORw0KGgo=")
    assert isinstance(result, InlineBytes)
    assert result.data == b"\x89PNG\r\n\x1a\n"


@pytest.mark.parametrize("uri", ["model.bin", "textures/albedo.png", "https://example.com/a.bin", ""])
def test_non_data_uris_are_external(uri):
    assert classify(uri) == ExternalReference(uri)


@pytest.mark.parametrize(
    "uri",
    [
        "data:text/plain;base64,QQ==",
        "data:application/octet-stream,QQ==",
        "data:application/gltf-buffer;base64,QQ==",
        "data:,hello",
    ],
)
def test_unrecognised_data_uris_fail(uri):
    with pytest.raises(UnsupportedDataUri) as excinfo:
        classify(uri)
    assert excinfo.value.uri == uri


def test_bad_payload_propagates_base64_error():
    with pytest.raises(MalformedBase64):
        classify("data:image/jpeg;base64,Q")
