from rapidread.config import ReaderConfig, clamp_block_size, clamp_rate


def test_defaults():
    config = ReaderConfig()
    assert config.block_size == 3
    assert config.rate == 3
    assert config.autoplay is False


def test_clamping():
    assert clamp_block_size(0) == 1
    assert clamp_block_size(42) == 10
    assert clamp_rate(-5) == 1
    assert clamp_rate(11) == 10
    assert clamp_rate(7) == 7


def test_clamp_coerces_garbage():
    assert clamp_rate("4") == 4
    assert clamp_rate(None) == 1
    assert clamp_block_size(2.9) == 2


def test_config_clamps_on_creation():
    config = ReaderConfig(block_size=50, rate=0)
    assert config.block_size == 10
    assert config.rate == 1
