import jsonany


def test_public_api_exports_resolve() -> None:
    for name in jsonany.__all__:
        assert hasattr(jsonany, name), name


def test_top_level_roundtrip() -> None:
    root = jsonany.decode(b'{"Image": {"Width": 800, "IDs": [116, 943, 234]}}')
    image, ok = jsonany.object_ok(root["Image"])
    assert ok
    assert image["Width"].tag() is jsonany.Tag.NUMBER_INT
    assert jsonany.decode_canonical(b"[3,1,2]").render() == "[1,2,3]"
