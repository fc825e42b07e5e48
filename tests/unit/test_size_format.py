from td2c.UTILS.size_format import format_binary_size, format_mib

def test_format_binary_size():
    assert format_binary_size(0) == "0B"
    assert format_binary_size(512) == "512B"
    assert format_binary_size(1024) == "1KiB"
    assert format_binary_size(1536 * 1024 * 1024) == "1.5GiB"

def test_format_mib():
    assert format_mib(64) == "64MiB"
    assert format_mib(128) == "128MiB"
    assert format_mib(1000) == "1000MiB"
    assert format_mib(1024) == "1GiB"
    assert format_mib(1024 * 1024) == "1TiB"

def test_format_mib_none():
    assert format_mib(None) is None
