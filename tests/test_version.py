import re


def test_version_is_the_base_version() -> None:
    import tagcodec
    from tagcodec.version import BASE_VERSION
    assert tagcodec.__version__ == BASE_VERSION
    # a plain release number, installable as is
    assert re.fullmatch(r'\d+\.\d+\.\d+', tagcodec.__version__)
